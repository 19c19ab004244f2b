"""Unit tests for the validation engine."""

import logging

import pytest

from src.container_validation.check_digit import CheckDigitCalculator
from src.container_validation.engine import ValidationEngine
from src.container_validation.types import (
    FormatContract,
    NumberKind,
    SocNumber,
    StandardNumber,
)


@pytest.fixture
def engine(soc_allow_list):
    """Fixture providing an ISO 6346 engine with a SOC allow-list."""
    return ValidationEngine(soc_allow_list=soc_allow_list)


@pytest.fixture
def reference_engine(soc_allow_list):
    """Fixture providing an engine enforcing the hyphenated legacy contract."""
    return ValidationEngine(
        soc_allow_list=soc_allow_list,
        format_contract=FormatContract.REFERENCE,
    )


class TestClassify:
    """Test routing of candidates to validation paths."""

    def test_soc_prefix(self):
        """XXXX-prefixed candidates are SOC numbers."""
        number = ValidationEngine.classify("XXXX0001")
        assert number == SocNumber("XXXX0001")
        assert number.kind == NumberKind.SOC

    def test_standard(self):
        """Everything else is a standard number."""
        number = ValidationEngine.classify("CSQU3054383")
        assert number == StandardNumber("CSQU3054383")
        assert number.kind == NumberKind.STANDARD


class TestValidateOne:
    """Test single-candidate validation under the ISO 6346 contract."""

    def test_valid_numbers(self, engine, valid_container_numbers):
        """Correct format and check digit are valid."""
        for container_id in valid_container_numbers:
            assert engine.validate_one(container_id) is True

    @pytest.mark.parametrize(
        "container_id", ["", "A", "CSQU305438", "CSQU30543833", "XXX0001"]
    )
    def test_wrong_length_invalid(self, engine, container_id):
        """Non-SOC candidates not 11 characters long are invalid."""
        outcome = engine.check_one(container_id)
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "INVALID_LENGTH"

    def test_wrong_check_digit(self, engine):
        """A mistyped check digit is reported with both digits."""
        outcome = engine.check_one("CSQU3054385")

        assert outcome.is_valid is False
        assert outcome.kind == NumberKind.STANDARD
        assert outcome.rejection_reason.constant == "INVALID_CHECK_DIGIT"
        assert outcome.check_digit_expected == 3
        assert outcome.check_digit_actual == 5

    def test_hyphenated_number_invalid_format(self, engine):
        """The legacy shape fails the ISO 6346 format check."""
        outcome = engine.check_one("1234-5678-9")
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "INVALID_FORMAT"

    def test_soc_listed(self, engine):
        """Listed SOC numbers are valid."""
        outcome = engine.check_one("XXXX0001")
        assert outcome.is_valid is True
        assert outcome.kind == NumberKind.SOC
        assert outcome.rejection_reason is None

    def test_soc_unlisted(self, engine):
        """Unlisted SOC numbers are invalid."""
        outcome = engine.check_one("XXXX0003")
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "SOC_NOT_LISTED"

    def test_soc_non_digit_suffix(self, engine):
        """SOC prefix with letters after it is not a SOC number."""
        outcome = engine.check_one("XXXXABC1")
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "INVALID_SOC_FORMAT"
        assert outcome.diagnostic == "Container number 'XXXXABC1' is not a valid SOC number."

    def test_soc_takes_precedence_over_checksum(self, engine):
        """An XXXX number with a passing checksum is still judged by the allow-list."""
        assert CheckDigitCalculator().compute_and_verify("XXXX1234560") is True

        outcome = engine.check_one("XXXX1234560")

        assert outcome.kind == NumberKind.SOC
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "SOC_NOT_LISTED"

    def test_soc_never_reaches_checksum(self, engine, monkeypatch):
        """Check digit logic is never invoked for SOC numbers."""

        def fail(*args, **kwargs):
            raise AssertionError("check digit calculator invoked")

        monkeypatch.setattr(engine.check_digit_calculator, "verify", fail)

        assert engine.validate_one("XXXX0001") is True
        assert engine.validate_one("XXXXABC1") is False
        assert engine.validate_one("XXXX3054383") is False

    def test_checksum_skipped_after_format_failure(self, engine, monkeypatch):
        """Check digit logic only runs once the format has matched."""

        def fail(*args, **kwargs):
            raise AssertionError("check digit calculator invoked")

        monkeypatch.setattr(engine.check_digit_calculator, "verify", fail)

        assert engine.validate_one("csqu3054383") is False

    def test_idempotent(self, engine):
        """Repeated calls yield identical results."""
        for container_id in ["CSQU3054383", "CSQU3054385", "XXXX0001", "bogus"]:
            assert engine.check_one(container_id) == engine.check_one(container_id)

    def test_no_allow_list(self):
        """An engine without a registry rejects every SOC number."""
        engine = ValidationEngine()
        assert engine.soc_allow_list == frozenset()
        assert engine.validate_one("XXXX0001") is False

    def test_allow_list_is_frozen(self):
        """The allow-list is copied into an immutable set."""
        source = ["XXXX0001"]
        engine = ValidationEngine(soc_allow_list=source)
        source.append("XXXX0002")

        assert isinstance(engine.soc_allow_list, frozenset)
        assert engine.validate_one("XXXX0002") is False

    def test_failure_logged_as_warning(self, engine, caplog):
        """Rejections are logged with the diagnostic text."""
        with caplog.at_level(logging.WARNING, logger="src.container_validation.engine"):
            engine.validate_one("CSQU305438")

        assert "Container number 'CSQU305438' is not 11 characters long." in caplog.text

    def test_success_not_logged(self, engine, caplog):
        """Valid numbers produce no warning."""
        with caplog.at_level(logging.WARNING, logger="src.container_validation.engine"):
            engine.validate_one("CSQU3054383")

        assert caplog.records == []


class TestReferenceContract:
    """Test engine behaviour under the hyphenated legacy contract."""

    def test_hyphenated_number_fails_malformed(self, reference_engine, caplog):
        """The legacy shape passes format but cannot be checksummed."""
        with caplog.at_level(logging.WARNING, logger="src.container_validation.engine"):
            outcome = reference_engine.check_one("1234-5678-9")

        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "MALFORMED_CHARACTER"
        assert "1234-5678-9" in caplog.text

    def test_iso_number_fails_format(self, reference_engine):
        """A true ISO 6346 number is rejected by the legacy shape."""
        outcome = reference_engine.check_one("ABCD1234560")
        assert outcome.is_valid is False
        assert outcome.rejection_reason.constant == "INVALID_FORMAT"

    def test_soc_unaffected(self, reference_engine):
        """SOC validation does not depend on the format contract."""
        assert reference_engine.validate_one("XXXX0001") is True


class TestValidateBatch:
    """Test batch aggregation."""

    def test_mixed_batch(self, engine):
        """Each candidate maps to its own verdict."""
        results = engine.validate_batch(
            ["CSQU3054383", "CSQU3054385", "XXXX0001", "XXXXABC1"]
        )

        assert results == {
            "CSQU3054383": True,
            "CSQU3054385": False,
            "XXXX0001": True,
            "XXXXABC1": False,
        }

    def test_duplicates_collapse(self, engine):
        """Identical strings collapse into a single entry."""
        results = engine.validate_batch(["A", "A", "B"])
        assert len(results) == 2
        assert results == {"A": False, "B": False}

    def test_duplicate_valid_number(self, engine):
        """A duplicated number keeps the single-call verdict."""
        results = engine.validate_batch(["CSQU3054383", "CSQU3054383"])
        assert results == {"CSQU3054383": engine.validate_one("CSQU3054383")}

    def test_distinct_strings_kept(self, engine):
        """Strings differing only in case or whitespace stay distinct."""
        results = engine.validate_batch(["CSQU3054383", "csqu3054383", " CSQU3054383"])
        assert len(results) == 3
        assert results["CSQU3054383"] is True
        assert results["csqu3054383"] is False
        assert results[" CSQU3054383"] is False

    def test_batch_matches_single(self, engine, valid_container_numbers):
        """Batch verdicts equal single-candidate verdicts."""
        candidates = valid_container_numbers + [
            "CSQU3054385",
            "1234-5678-9",
            "XXXX0002",
            "XXXX0003",
            "",
        ]

        results = engine.validate_batch(candidates)

        for candidate in candidates:
            assert results[candidate] == engine.validate_one(candidate)

    def test_failures_do_not_stop_batch(self, engine):
        """Malformed candidates anywhere in the batch do not abort it."""
        results = engine.validate_batch(["", "CSQU305438A", "CSQU3054383"])
        assert results["CSQU3054383"] is True

    def test_empty_batch(self, engine):
        """No candidates, no results."""
        assert engine.validate_batch([]) == {}

    def test_check_batch_outcomes(self, engine):
        """check_batch keeps the detailed outcomes."""
        outcomes = engine.check_batch(["CSQU3054385", "XXXX0001"])

        assert outcomes["CSQU3054385"].rejection_reason.constant == "INVALID_CHECK_DIGIT"
        assert outcomes["XXXX0001"].kind == NumberKind.SOC
        assert ValidationEngine.verdicts(outcomes) == {
            "CSQU3054385": False,
            "XXXX0001": True,
        }

    def test_accepts_generator(self, engine):
        """Any iterable of candidates is accepted."""
        results = engine.validate_batch(c for c in ["CSQU3054383", "XXXX0001"])
        assert results == {"CSQU3054383": True, "XXXX0001": True}

    def test_summary_logged(self, engine, caplog):
        """A summary line is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="src.container_validation.engine"):
            engine.validate_batch(["CSQU3054383", "CSQU3054385"])

        assert "Validated 2 container numbers: 1 valid, 1 invalid" in caplog.text
