"""Output adapters for validation results."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO

from src.utils.io import save_json

from .types import ValidationOutcome, ValidationResult


def format_result_line(container_number: str, is_valid: bool) -> str:
    return f"Container : {container_number} , Valid: {str(is_valid).lower()}"


def print_results(results: ValidationResult, stream: Optional[TextIO] = None) -> None:
    """Print one line per container number."""
    stream = stream or sys.stdout
    for container_number, is_valid in results.items():
        print(format_result_line(container_number, is_valid), file=stream)


def build_report(outcomes: Mapping[str, ValidationOutcome]) -> Dict[str, Any]:
    """
    Build a JSON-serialisable report from detailed outcomes.

    Args:
        outcomes: Container number -> outcome, as returned by check_batch

    Returns:
        Report dictionary with a summary block and one entry per number
    """
    entries = []
    for container_number, outcome in outcomes.items():
        reason = outcome.rejection_reason
        entries.append({
            'container_number': container_number,
            'valid': outcome.is_valid,
            'kind': outcome.kind.value,
            'rejection_code': reason.code if reason else None,
            'rejection_constant': reason.constant if reason else None,
            'diagnostic': outcome.diagnostic,
            'check_digit_expected': outcome.check_digit_expected,
            'check_digit_actual': outcome.check_digit_actual,
        })

    valid_count = sum(1 for outcome in outcomes.values() if outcome.is_valid)

    return {
        'generated_at': datetime.now().isoformat(),
        'summary': {
            'total': len(entries),
            'valid': valid_count,
            'invalid': len(entries) - valid_count,
        },
        'results': entries,
    }


def save_report(outcomes: Mapping[str, ValidationOutcome], output_path: Path) -> None:
    """Write the JSON report to disk, creating parent directories."""
    save_json(build_report(outcomes), output_path)
