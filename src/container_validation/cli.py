"""
Container Number Validation CLI

Reads candidate container numbers (column of a parquet/CSV file, or one
comma-separated line typed by the operator), validates them against ISO 6346
and the SOC registry, and prints one result line per number.

Usage:
    python -m src.container_validation.cli --input transfer.parquet
    python -m src.container_validation.cli --interactive --format-contract reference
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.utils.logging_config import setup_logging

from .config_loader import Config, get_default_config, load_config
from .engine import ValidationEngine
from .exceptions import ContainerValidationError
from .sinks import print_results, save_report
from .sources import load_soc_registry, prompt_candidates, read_column_candidates
from .types import FormatContract

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Validate shipping container numbers (ISO 6346 + SOC registry)',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to YAML configuration file (bundled defaults if omitted)'
    )
    parser.add_argument(
        '--input',
        type=str,
        default=None,
        help='Parquet or CSV file with container numbers'
    )
    parser.add_argument(
        '--column',
        type=str,
        default=None,
        help='Column holding the container numbers'
    )
    parser.add_argument(
        '--interactive',
        action='store_true',
        help='Prompt for comma-separated container numbers, ignoring any input file'
    )
    parser.add_argument(
        '--soc-registry',
        type=str,
        default=None,
        help='TOML file listing valid SOC numbers'
    )
    parser.add_argument(
        '--format-contract',
        choices=[contract.value for contract in FormatContract],
        default=None,
        help='Structural format enforced for standard container numbers'
    )
    parser.add_argument(
        '--report',
        type=str,
        default=None,
        help='Write a JSON report with rejection reasons to this path'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Logging level (overrides configuration)'
    )
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Load configuration and apply command-line overrides."""
    if args.config is None:
        config = get_default_config()
    else:
        config = load_config(Path(args.config))

    if args.input is not None:
        config.input.path = Path(args.input)
    if args.interactive:
        config.input.path = None
    if args.column is not None:
        config.input.column = args.column
    if args.soc_registry is not None:
        config.soc.registry_path = Path(args.soc_registry)
    if args.format_contract is not None:
        config.format.contract = FormatContract(args.format_contract)
    if args.report is not None:
        config.output.report_path = Path(args.report)
    if args.log_level is not None:
        config.logging.level = args.log_level

    return config


def read_candidates(config: Config) -> List[str]:
    if config.input.path is None:
        return prompt_candidates()
    return read_column_candidates(config.input.path, config.input.column)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or logging.INFO)

    try:
        config = resolve_config(args)
        setup_logging(config.logging.level)

        # Inputs are loaded up front: a broken registry or source aborts the run
        soc_allow_list = load_soc_registry(config.soc.registry_path)
        candidates = read_candidates(config)
    except ContainerValidationError as e:
        logger.error(f"Cannot run validation: {e}")
        return 1

    engine = ValidationEngine(
        soc_allow_list=soc_allow_list,
        format_contract=config.format.contract,
    )
    outcomes = engine.check_batch(candidates)
    print_results(engine.verdicts(outcomes))

    if config.output.report_path is not None:
        try:
            save_report(outcomes, config.output.report_path)
        except OSError as e:
            logger.error(f"Cannot write report {config.output.report_path}: {e}")
            return 1
        logger.info(f"Report saved to {config.output.report_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
