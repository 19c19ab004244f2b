"""Configuration loader with Pydantic validation for container validation.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from src.utils.constants import DEFAULT_INPUT_COLUMN, DEFAULT_SOC_REGISTRY
from src.utils.io import load_yaml

from .exceptions import ConfigError
from .types import FormatContract


class FormatConfig(BaseModel):
    """Format validation configuration.

    Attributes:
        contract: Structural contract for standard numbers
    """

    contract: FormatContract = FormatContract.ISO6346


class SocConfig(BaseModel):
    """SOC registry configuration.

    Attributes:
        registry_path: TOML file listing valid SOC numbers
    """

    registry_path: Path = Path(DEFAULT_SOC_REGISTRY)


class InputConfig(BaseModel):
    """Candidate input configuration.

    Attributes:
        path: Parquet or CSV file with container numbers (None prompts interactively)
        column: Column holding the container numbers
    """

    path: Optional[Path] = None
    column: str = DEFAULT_INPUT_COLUMN


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        report_path: Optional JSON report destination
    """

    report_path: Optional[Path] = None


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Root logging level name
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Config(BaseModel):
    """Root configuration container."""

    format: FormatConfig = Field(default_factory=FormatConfig)
    soc: SocConfig = Field(default_factory=SocConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or fails validation

    Example:
        >>> config = load_config(Path("src/container_validation/config.yaml"))
        >>> print(config.format.contract)
        FormatContract.ISO6346
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        config_dict = load_yaml(config_path)
    except OSError as e:
        raise ConfigError(f"Error reading configuration {config_path}: {e}") from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse configuration {config_path}: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigError(f"Configuration {config_path} must be a YAML mapping")

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from src/container_validation/config.yaml
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
