"""
Shared Constants for Container Number Validation

This module contains constants used across multiple modules to ensure
consistency and avoid duplication.
"""

# ============================================================================
# Container ID Constants
# ============================================================================
# ISO 6346 standard for container identification
CONTAINER_ID_LENGTH = 11  # 4 letters (owner code) + 6 digits (serial) + 1 check
OWNER_CODE_LENGTH = 4  # Positions 0-3 are mapped through the letter table
CHECK_DIGIT_POSITION = 10  # 0-indexed position of the check digit

# ============================================================================
# Shipper-Owned Containers (SOC)
# ============================================================================
SOC_PREFIX = "XXXX"  # Literal prefix routing a number to allow-list validation

# ============================================================================
# Input Defaults
# ============================================================================
DEFAULT_INPUT_COLUMN = "container_number"
DEFAULT_SOC_REGISTRY = "app/SOC.toml"
