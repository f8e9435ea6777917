"""Project-wide exception types."""

class OptionStrategyError(Exception):
    """Base exception for all engine errors."""


class SchemaError(OptionStrategyError):
    """Raised when a leg or strategy value is structurally invalid."""


class ConfigError(OptionStrategyError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class UnknownStrategyError(ConfigValidationError):
    """Raised when a strategy template name cannot be resolved."""


class DataSourceError(OptionStrategyError):
    """Raised when market data retrieval or chain checks fail."""


class DependencyError(OptionStrategyError):
    """Raised when required dependencies are missing or incompatible."""
