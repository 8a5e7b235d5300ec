"""
Custom exceptions for FSP.

All exceptions inherit from FSPError for easy catching.
The scoring engine itself never raises on malformed values; these
surface only at the collector, profile loading, and CLI boundaries.
"""


class FSPError(Exception):
    """Base exception for all FSP errors."""

    pass


class ConfigurationError(FSPError):
    """Raised when configuration or a profile file is invalid or missing."""

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        super().__init__(message)


class UnknownFieldError(FSPError):
    """Raised when an input update names a field the record does not have."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
