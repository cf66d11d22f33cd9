class ShdateError(Exception):
    """Base error."""

class ConfigError(ShdateError, ValueError):
    """Raised when a configuration value is rejected."""

class DateParseError(ShdateError, ValueError):
    """Raised in strict mode when a date string contains nothing recognizable."""
