"""Container Number Validation.

This module validates shipping container identification numbers against the
ISO 6346 standard, with an allow-list path for shipper-owned containers (SOC).

Core Components:
    - types: Data structures (ValidationOutcome, RejectionReason, etc.)
    - format_matcher: Length and structure checks
    - check_digit: ISO 6346 check digit calculation
    - soc_validator: SOC shape and allow-list checks
    - engine: Dispatch and batch aggregation
    - config_loader: Configuration loading with Pydantic validation
    - sources / sinks: Input and output adapters

Example:
    >>> from src.container_validation import ValidationEngine
    >>> engine = ValidationEngine(soc_allow_list={"XXXX0001"})
    >>> engine.validate_one("CSQU3054383")
    True
"""

from .check_digit import (
    LETTER_VALUES,
    CheckDigitCalculator,
    MalformedCharacterError,
    calculate_check_digit,
)
from .config_loader import (
    Config,
    FormatConfig,
    InputConfig,
    LoggingConfig,
    OutputConfig,
    SocConfig,
    get_default_config,
    load_config,
)
from .engine import ValidationEngine
from .exceptions import (
    CandidateSourceError,
    ConfigError,
    ContainerValidationError,
    SocRegistryError,
)
from .format_matcher import FormatMatcher
from .soc_validator import SocValidator, is_soc_number
from .types import (
    FormatContract,
    NumberKind,
    RejectionReason,
    SocNumber,
    StandardNumber,
    ValidationOutcome,
    ValidationResult,
)

__all__ = [
    # Types
    "FormatContract",
    "NumberKind",
    "RejectionReason",
    "SocNumber",
    "StandardNumber",
    "ValidationOutcome",
    "ValidationResult",
    # Configuration
    "Config",
    "FormatConfig",
    "SocConfig",
    "InputConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Validation
    "LETTER_VALUES",
    "calculate_check_digit",
    "CheckDigitCalculator",
    "MalformedCharacterError",
    "FormatMatcher",
    "SocValidator",
    "is_soc_number",
    "ValidationEngine",
    # Errors
    "ContainerValidationError",
    "ConfigError",
    "CandidateSourceError",
    "SocRegistryError",
]
