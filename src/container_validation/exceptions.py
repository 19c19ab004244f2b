"""Exception hierarchy for infrastructure failures.

Per-identifier validation failures are outcomes, never exceptions. These
errors mean a run cannot start: its inputs or configuration are unusable.
"""


class ContainerValidationError(Exception):
    """Base exception for all container validation errors."""


class ConfigError(ContainerValidationError):
    """Configuration file missing or invalid."""


class CandidateSourceError(ContainerValidationError):
    """Candidate container numbers could not be read."""


class SocRegistryError(ContainerValidationError):
    """SOC registry missing, unreadable or malformed."""
