"""
I/O Utilities

File input/output operations.
"""

import json
import tomllib
import yaml
from pathlib import Path
from typing import Dict, Any


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2):
    """Save data to JSON file."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w') as f:
        json.dump(data, f, indent=indent)


def load_yaml(file_path: Path) -> Dict[str, Any]:
    """Load YAML file."""
    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def load_toml(file_path: Path) -> Dict[str, Any]:
    """Load TOML file."""
    with open(file_path, 'rb') as f:
        return tomllib.load(f)
