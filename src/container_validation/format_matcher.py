"""Structural format validation for container numbers."""

import re
from typing import Dict, Optional, Pattern

from src.utils.constants import CONTAINER_ID_LENGTH

from .types import INVALID_FORMAT, INVALID_LENGTH, FormatContract, RejectionReason

FORMAT_PATTERNS: Dict[FormatContract, Pattern[str]] = {
    # 4 letters (owner code + category) + 6 digits (serial) + 1 check digit
    FormatContract.ISO6346: re.compile(r"^[A-Z]{4}[0-9]{7}$"),
    # Hyphenated digit groups accepted by the legacy tool
    FormatContract.REFERENCE: re.compile(r"^[0-9]{4}-[0-9]{4}-[0-9]$"),
}


class FormatMatcher:
    """Checks length and positional character classes of a container number.

    Args:
        contract: Which structural contract to enforce.

    Example:
        >>> FormatMatcher().matches("CSQU3054383")
        True
        >>> FormatMatcher(FormatContract.REFERENCE).matches("1234-5678-9")
        True
    """

    def __init__(self, contract: FormatContract = FormatContract.ISO6346):
        self.contract = contract
        self.pattern = FORMAT_PATTERNS[contract]

    def check(self, candidate: str) -> Optional[RejectionReason]:
        """Return the first failed rule, or None if the format is accepted."""
        if len(candidate) != CONTAINER_ID_LENGTH:
            return INVALID_LENGTH

        if not self.pattern.fullmatch(candidate):
            return INVALID_FORMAT

        return None

    def matches(self, candidate: str) -> bool:
        return self.check(candidate) is None
