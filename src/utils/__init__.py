"""
Shared Utilities

Common functions used across all modules.
"""

from src.utils.io import load_toml, load_yaml, save_json
from src.utils.logging_config import setup_logging

__all__ = [
    "load_toml",
    "load_yaml",
    "save_json",
    "setup_logging",
]
