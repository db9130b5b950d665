"""Configuration error."""


class ConfigError(ValueError):
    """Raised when configuration values are inconsistent.

    A ValueError so pydantic validators report it as a validation error.
    """
