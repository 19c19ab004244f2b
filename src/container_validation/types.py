"""Type definitions for container number validation.

This module defines the core data structures used throughout the validation
engine: the classified candidate variants, rejection reasons, and
per-identifier outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


class FormatContract(Enum):
    """Structural contract enforced by the format matcher."""

    ISO6346 = "iso6346"  # 4 uppercase letters + 7 digits, no separators
    REFERENCE = "reference"  # dddd-dddd-d, as accepted by the legacy tool


class NumberKind(Enum):
    """Validation path a candidate was routed to."""

    STANDARD = "standard"
    SOC = "soc"


@dataclass(frozen=True)
class StandardNumber:
    """Candidate validated by format and check digit.

    Attributes:
        text: Raw candidate string, exactly as supplied
    """

    text: str
    kind: NumberKind = field(default=NumberKind.STANDARD, init=False)


@dataclass(frozen=True)
class SocNumber:
    """Shipper-owned container candidate validated by allow-list membership.

    Attributes:
        text: Raw candidate string, exactly as supplied
    """

    text: str
    kind: NumberKind = field(default=NumberKind.SOC, init=False)


ClassifiedNumber = Union[StandardNumber, SocNumber]


@dataclass(frozen=True)
class RejectionReason:
    """Structured rejection reason with error code and context.

    Attributes:
        code: Error code (e.g., "CNV-E001")
        constant: String constant for programmatic checking (e.g., "INVALID_LENGTH")
        message: Human-readable explanation, phrased to follow the container number
        stage: Validation stage where rejection occurred (e.g., "FORMAT")
        severity: Error severity level ("ERROR" or "WARNING")
    """

    code: str
    constant: str
    message: str
    stage: str
    severity: str = "ERROR"

    def describe(self, container_number: str) -> str:
        """Render the diagnostic line for a rejected container number."""
        return f"Container number '{container_number}' {self.message}."


INVALID_LENGTH = RejectionReason(
    code="CNV-E001",
    constant="INVALID_LENGTH",
    message="is not 11 characters long",
    stage="FORMAT",
)

INVALID_FORMAT = RejectionReason(
    code="CNV-E002",
    constant="INVALID_FORMAT",
    message="is not a valid format",
    stage="FORMAT",
)

INVALID_CHECK_DIGIT = RejectionReason(
    code="CNV-E004",
    constant="INVALID_CHECK_DIGIT",
    message="is not a valid check digit",
    stage="CHECK_DIGIT",
)

INVALID_SOC_FORMAT = RejectionReason(
    code="CNV-E005",
    constant="INVALID_SOC_FORMAT",
    message="is not a valid SOC number",
    stage="SOC",
)

SOC_NOT_LISTED = RejectionReason(
    code="CNV-E006",
    constant="SOC_NOT_LISTED",
    message="is not in the list of SOC numbers",
    stage="SOC",
)


def malformed_character(position: int) -> RejectionReason:
    """Build the rejection for a character of the wrong class at `position`."""
    return RejectionReason(
        code="CNV-E003",
        constant="MALFORMED_CHARACTER",
        message=f"has a malformed character at position {position}",
        stage="CHECK_DIGIT",
    )


@dataclass(frozen=True)
class ValidationOutcome:
    """Validation outcome for a single container number.

    Attributes:
        container_number: Candidate string, exactly as supplied
        is_valid: Final verdict
        kind: Validation path taken (standard or SOC)
        rejection_reason: Which rule failed, None if valid
        check_digit_expected: Computed check digit (standard path only)
        check_digit_actual: Check digit read from the candidate (standard path only)
    """

    container_number: str
    is_valid: bool
    kind: NumberKind
    rejection_reason: Optional[RejectionReason] = None
    check_digit_expected: Optional[int] = None
    check_digit_actual: Optional[int] = None

    @property
    def diagnostic(self) -> Optional[str]:
        """Human-readable diagnostic, None if valid."""
        if self.rejection_reason is None:
            return None
        return self.rejection_reason.describe(self.container_number)


ValidationResult = Dict[str, bool]
