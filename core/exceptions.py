"""
Custom exceptions for fileops.
"""


class FileOpsError(Exception):
    """Base exception class for fileops errors."""

    pass


class InvalidRequestError(FileOpsError):
    """Raised when an operation request is built from invalid parameters."""

    pass


class ConfigurationError(FileOpsError):
    """Raised when the configuration file cannot be loaded."""

    pass
