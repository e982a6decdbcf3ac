"""
Custom exceptions for AutoUI.
Defines exception hierarchy for different error types.
"""


class AutoUIError(Exception):
    """Base exception for AutoUI."""

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class SchemaError(AutoUIError):
    """Malformed question schema, including duplicate question keys."""

    pass


class InputError(AutoUIError):
    """Missing or unreadable corpus, schema or answer input."""

    pass


class ConfigurationError(AutoUIError):
    """Configuration related errors."""

    pass


class NetworkError(AutoUIError):
    """Issue tracker API and other network related errors."""

    pass


class FileSystemError(AutoUIError):
    """File system operation related errors."""

    pass


class TemplateError(AutoUIError):
    """Front-end template rendering errors."""

    pass
