"""ISO 6346 check digit calculation and verification.

This module implements the ISO 6346 weighted checksum used to detect
transcription errors in container identification numbers.

References:
    - ISO 6346:2022 - Freight containers -- Coding, identification and marking
    - https://www.iso.org/standard/83558.html
"""

import string
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from src.utils.constants import (
    CHECK_DIGIT_POSITION,
    CONTAINER_ID_LENGTH,
    OWNER_CODE_LENGTH,
)

from .types import (
    INVALID_CHECK_DIGIT,
    INVALID_LENGTH,
    RejectionReason,
    malformed_character,
)


def _letter_values() -> Iterator[Tuple[str, int]]:
    # Values run upward from 10, skipping multiples of 11 (11, 22, 33)
    value = 10
    for letter in string.ascii_uppercase:
        if value % 11 == 0:
            value += 1
        yield letter, value
        value += 1


LETTER_VALUES: Mapping[str, int] = MappingProxyType(dict(_letter_values()))

DIGITS = frozenset(string.digits)


class MalformedCharacterError(ValueError):
    """Character of the wrong class at a checksummed position."""

    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(f"Invalid character {char!r} at position {position}")


def _char_value(position: int, char: str) -> int:
    if position < OWNER_CODE_LENGTH:
        if char not in LETTER_VALUES:
            raise MalformedCharacterError(position, char)
        return LETTER_VALUES[char]

    if char not in DIGITS:
        raise MalformedCharacterError(position, char)
    return int(char)


def calculate_check_digit(container_id_prefix: str) -> int:
    """Calculate ISO 6346 check digit for the first 10 characters.

    1. Map each character to a numeric value:
       - Positions 0-3 (owner code): letter table, A=10 ... Z=38 skipping 11, 22, 33
       - Positions 4-9 (serial): the digit's own value
    2. Multiply each value by its position weight 2**i
    3. Check digit = (sum mod 11) mod 10, so a remainder of 10 becomes 0

    Args:
        container_id_prefix: First 10 characters of a container number

    Returns:
        Check digit (0-9)

    Raises:
        ValueError: If input is not exactly 10 characters
        MalformedCharacterError: If a character has the wrong class for its position

    Example:
        >>> calculate_check_digit("CSQU305438")
        3
        >>> calculate_check_digit("ABCD123456")
        0
    """
    if len(container_id_prefix) != CHECK_DIGIT_POSITION:
        raise ValueError(
            f"Expected {CHECK_DIGIT_POSITION} characters, got {len(container_id_prefix)}"
        )

    total = sum(
        _char_value(pos, char) * 2**pos for pos, char in enumerate(container_id_prefix)
    )

    return (total % 11) % 10


class CheckDigitCalculator:
    """Verifies the trailing check digit of a structurally valid number.

    Malformed input never raises out of `compute_and_verify`; it is reported
    as an INVALID_LENGTH or MALFORMED_CHARACTER rejection instead.
    """

    def verify(
        self, candidate: str
    ) -> Tuple[Optional[RejectionReason], Optional[int], Optional[int]]:
        """Verify the check digit of an 11-character candidate.

        Args:
            candidate: Full container number, check digit included

        Returns:
            Tuple of (rejection_reason, expected_check_digit, actual_check_digit).
            rejection_reason is None when the check digit matches. The digits
            are None when they could not be determined.
        """
        if len(candidate) != CONTAINER_ID_LENGTH:
            return INVALID_LENGTH, None, None

        actual_char = candidate[CHECK_DIGIT_POSITION]
        try:
            expected = calculate_check_digit(candidate[:CHECK_DIGIT_POSITION])
        except MalformedCharacterError as e:
            return malformed_character(e.position), None, None

        if actual_char not in DIGITS:
            return malformed_character(CHECK_DIGIT_POSITION), expected, None

        actual = int(actual_char)
        if expected != actual:
            return INVALID_CHECK_DIGIT, expected, actual

        return None, expected, actual

    def check(self, candidate: str) -> Optional[RejectionReason]:
        reason, _, _ = self.verify(candidate)
        return reason

    def compute_and_verify(self, candidate: str) -> bool:
        return self.check(candidate) is None
