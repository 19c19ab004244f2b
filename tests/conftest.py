"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import pytest


@pytest.fixture
def valid_container_numbers():
    """Fixture providing ISO 6346 numbers with hand-verified check digits."""
    return [
        "CSQU3054383",
        "MSKU1234565",
        "ABCU0000001",
        "TESU1234567",
        "ABCD1234560",  # sum mod 11 == 10, check digit 0
    ]


@pytest.fixture
def soc_allow_list():
    """Fixture providing a small SOC allow-list."""
    return frozenset({"XXXX0001", "XXXX0002", "XXXX123456"})


@pytest.fixture
def soc_registry_file(tmp_path):
    """Fixture writing a valid SOC registry TOML file."""
    path = tmp_path / "SOC.toml"
    path.write_text(
        '[soc]\ncontainers = ["XXXX0001", "XXXX0002", "XXXX123456"]\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def parquet_input(tmp_path):
    """Fixture writing a parquet file with duplicate and missing numbers."""
    import pandas as pd

    path = tmp_path / "transfer.parquet"
    df = pd.DataFrame(
        {
            "container_number": [
                "CSQU3054383",
                "CSQU3054385",
                "CSQU3054383",
                None,
                "XXXX0001",
            ],
            "vessel": ["A", "B", "C", "D", "E"],
        }
    )
    df.to_parquet(path)
    return path
