"""Validation engine: routes candidates and aggregates batch results.

Every candidate is classified once as a standard or SOC number:
    - SOC numbers (``XXXX`` prefix): shape + allow-list membership only
    - Standard numbers: format match, then ISO 6346 check digit

Per-identifier failures are outcomes, not errors. They are logged as
warnings and never stop the batch.

Example:
    >>> engine = ValidationEngine(soc_allow_list={"XXXX0001"})
    >>> engine.validate_batch(["CSQU3054383", "XXXX0001", "CSQU3054385"])
    {'CSQU3054383': True, 'XXXX0001': True, 'CSQU3054385': False}
"""

import logging
from typing import Dict, Iterable, Mapping, Optional

from .check_digit import CheckDigitCalculator
from .format_matcher import FormatMatcher
from .soc_validator import SocValidator, is_soc_number
from .types import (
    ClassifiedNumber,
    FormatContract,
    SocNumber,
    StandardNumber,
    ValidationOutcome,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class ValidationEngine:
    """Stateless container number validator.

    Args:
        soc_allow_list: Known-valid SOC numbers for this run. Frozen on entry.
        format_contract: Structural contract for standard numbers.

    Attributes:
        soc_allow_list: Read-only allow-list shared by all validations
        format_matcher: Length and structure checks
        check_digit_calculator: ISO 6346 checksum verification
        soc_validator: SOC shape and membership checks
    """

    def __init__(
        self,
        soc_allow_list: Optional[Iterable[str]] = None,
        format_contract: FormatContract = FormatContract.ISO6346,
    ):
        self.soc_allow_list = frozenset(soc_allow_list or ())
        self.format_matcher = FormatMatcher(format_contract)
        self.check_digit_calculator = CheckDigitCalculator()
        self.soc_validator = SocValidator()

        logger.debug(
            f"Validation engine ready: contract={format_contract.value}, "
            f"soc_numbers={len(self.soc_allow_list)}"
        )

    @staticmethod
    def classify(candidate: str) -> ClassifiedNumber:
        """Decide which validation path a candidate takes."""
        if is_soc_number(candidate):
            return SocNumber(candidate)
        return StandardNumber(candidate)

    def check_one(self, candidate: str) -> ValidationOutcome:
        """Validate one candidate and explain the verdict.

        Args:
            candidate: Raw container number, not normalized

        Returns:
            ValidationOutcome with verdict, validation path and rejection reason
        """
        number = self.classify(candidate)

        if isinstance(number, SocNumber):
            outcome = self._check_soc(number)
        else:
            outcome = self._check_standard(number)

        if outcome.diagnostic is not None:
            logger.warning(outcome.diagnostic)

        return outcome

    def _check_soc(self, number: SocNumber) -> ValidationOutcome:
        reason = self.soc_validator.check(number.text, self.soc_allow_list)
        return ValidationOutcome(
            container_number=number.text,
            is_valid=reason is None,
            kind=number.kind,
            rejection_reason=reason,
        )

    def _check_standard(self, number: StandardNumber) -> ValidationOutcome:
        reason = self.format_matcher.check(number.text)
        if reason is not None:
            return ValidationOutcome(
                container_number=number.text,
                is_valid=False,
                kind=number.kind,
                rejection_reason=reason,
            )

        reason, expected, actual = self.check_digit_calculator.verify(number.text)
        return ValidationOutcome(
            container_number=number.text,
            is_valid=reason is None,
            kind=number.kind,
            rejection_reason=reason,
            check_digit_expected=expected,
            check_digit_actual=actual,
        )

    def validate_one(self, candidate: str) -> bool:
        return self.check_one(candidate).is_valid

    def check_batch(self, candidates: Iterable[str]) -> Dict[str, ValidationOutcome]:
        """Validate every candidate; duplicates collapse, last write wins."""
        outcomes: Dict[str, ValidationOutcome] = {}
        for candidate in candidates:
            outcomes[candidate] = self.check_one(candidate)

        valid_count = sum(1 for outcome in outcomes.values() if outcome.is_valid)
        logger.info(
            f"Validated {len(outcomes)} container numbers: "
            f"{valid_count} valid, {len(outcomes) - valid_count} invalid"
        )
        return outcomes

    @staticmethod
    def verdicts(outcomes: Mapping[str, ValidationOutcome]) -> ValidationResult:
        """Reduce detailed outcomes to a container number -> verdict mapping."""
        return {number: outcome.is_valid for number, outcome in outcomes.items()}

    def validate_batch(self, candidates: Iterable[str]) -> ValidationResult:
        """Validate every candidate into a container number -> verdict mapping."""
        return self.verdicts(self.check_batch(candidates))
