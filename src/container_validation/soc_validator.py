"""Shipper-owned container (SOC) validation.

SOC numbers carry no reliable check digit. They are recognised by the
literal ``XXXX`` prefix and accepted only when listed in the SOC registry.
"""

import re
from typing import AbstractSet, Optional

from src.utils.constants import SOC_PREFIX

from .types import INVALID_SOC_FORMAT, SOC_NOT_LISTED, RejectionReason

SOC_PATTERN = re.compile(rf"{SOC_PREFIX}[0-9]+")


def is_soc_number(candidate: str) -> bool:
    """Check whether a candidate is routed to SOC validation."""
    return candidate.startswith(SOC_PREFIX)


class SocValidator:
    """Validates SOC numbers against shape and allow-list membership.

    Example:
        >>> validator = SocValidator()
        >>> validator.validate("XXXX0001", frozenset({"XXXX0001"}))
        True
        >>> validator.validate("XXXXABC1", frozenset({"XXXXABC1"}))
        False
    """

    def check(
        self, candidate: str, allow_list: AbstractSet[str]
    ) -> Optional[RejectionReason]:
        """Return the first failed rule, or None if the SOC number is accepted."""
        if not SOC_PATTERN.fullmatch(candidate):
            return INVALID_SOC_FORMAT

        if candidate not in allow_list:
            return SOC_NOT_LISTED

        return None

    def validate(self, candidate: str, allow_list: AbstractSet[str]) -> bool:
        return self.check(candidate, allow_list) is None
