"""
Custom exceptions for the file manager.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class FileManagerError(BaseAppError):
    """Exception raised by the file system port."""

    pass


class NavigationError(FileManagerError):
    """Raised when a path cannot be opened as a directory."""

    pass


class ReadError(FileManagerError):
    """Raised when a directory or file cannot be read."""

    pass


class WriteError(FileManagerError):
    """Raised when a file cannot be created, renamed, copied, moved or removed."""

    pass
