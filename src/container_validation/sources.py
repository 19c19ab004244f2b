"""Input adapters: candidate container numbers and the SOC registry.

Nothing here validates container numbers. Sources only read raw strings;
any failure to read is fatal to the run and raised as an exception.
"""

import logging
import sys
import tomllib
from pathlib import Path
from typing import FrozenSet, List, Optional, TextIO

import pandas as pd
from pydantic import BaseModel, ValidationError

from src.utils.io import load_toml

from .exceptions import CandidateSourceError, SocRegistryError

logger = logging.getLogger(__name__)

PROMPT = "Enter container numbers separated by a comma: "


class SocContainers(BaseModel):
    """The ``[soc]`` table of the registry file."""

    containers: List[str]


class SocRegistryFile(BaseModel):
    """SOC registry file layout.

    Example file:
        [soc]
        containers = ["XXXX0001", "XXXX0002"]
    """

    soc: SocContainers


def _read_table(path: Path) -> pd.DataFrame:
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path, dtype=str)
    return pd.read_parquet(path)


def read_column_candidates(path: Path, column: str) -> List[str]:
    """Read unique container numbers from one column of a parquet or CSV file.

    Nulls are dropped and duplicates removed, keeping first-seen order.

    Args:
        path: Parquet file (``.csv`` files are read as CSV)
        column: Column holding the container numbers

    Returns:
        List of raw candidate strings

    Raises:
        CandidateSourceError: If the file is missing, unreadable, or lacks the column
    """
    if not path.exists():
        raise CandidateSourceError(f"Input file not found: {path}")

    try:
        df = _read_table(path)
    except (OSError, ValueError) as e:
        raise CandidateSourceError(f"Error reading input file {path}: {e}") from e

    if column not in df.columns:
        raise CandidateSourceError(
            f"Column '{column}' not found in {path} (available: {list(df.columns)})"
        )

    series = df[column].dropna().astype(str)
    candidates = list(series.drop_duplicates())

    logger.info(f"Read {len(candidates)} unique container numbers from {path}")
    return candidates


def parse_candidate_text(text: str) -> List[str]:
    """Split operator text on commas into trimmed candidates.

    Empty pieces are kept: they are candidates like any other and are
    rejected by validation, not filtered here.

    Example:
        >>> parse_candidate_text(" CSQU3054383, XXXX0001 ,")
        ['CSQU3054383', 'XXXX0001', '']
    """
    return [piece.strip() for piece in text.strip().split(",")]


def prompt_candidates(
    stream_in: Optional[TextIO] = None, stream_out: Optional[TextIO] = None
) -> List[str]:
    """Ask the operator for one line of comma-separated container numbers.

    Raises:
        CandidateSourceError: If no line could be read (end of input)
    """
    stream_in = stream_in or sys.stdin
    stream_out = stream_out or sys.stdout

    print(PROMPT, file=stream_out)
    stream_out.flush()

    line = stream_in.readline()
    if not line:
        raise CandidateSourceError("No input received: end of input reached")

    return parse_candidate_text(line)


def load_soc_registry(path: Path) -> FrozenSet[str]:
    """Load the set of valid SOC numbers from a TOML registry file.

    Args:
        path: TOML file with a ``[soc]`` table and a ``containers`` list

    Returns:
        Frozen set of SOC numbers

    Raises:
        SocRegistryError: If the file is missing, unreadable, or malformed
    """
    if not path.exists():
        raise SocRegistryError(f"SOC registry not found: {path}")

    try:
        data = load_toml(path)
    except OSError as e:
        raise SocRegistryError(f"Error reading SOC registry {path}: {e}") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise SocRegistryError(f"Error parsing SOC registry {path}: {e}") from e

    try:
        registry = SocRegistryFile(**data)
    except ValidationError as e:
        raise SocRegistryError(f"Invalid SOC registry {path}: {e}") from e

    soc_numbers = frozenset(registry.soc.containers)
    logger.info(f"Loaded {len(soc_numbers)} SOC numbers from {path}")
    return soc_numbers
