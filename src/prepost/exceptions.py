# Custom exceptions for prepost

class PrepostError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(PrepostError):
    """Raised for configuration-related problems (bad framework name, bad viewport, ...)."""
    pass
