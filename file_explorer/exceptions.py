"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of filesystem failures reported to the user."""

    NOT_FOUND = "NotFound"
    NOT_A_DIRECTORY = "NotADirectory"
    ALREADY_EXISTS = "AlreadyExists"
    INVALID_FORMAT = "InvalidFormat"
    MOVE_ERROR = "MoveError"
    ACCESS_DENIED = "AccessDenied"
    COPY_ERROR = "CopyError"
    IO_ERROR = "IOError"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandParseError(BaseAppError):
    """Exception raised when an input line cannot be tokenized."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    kind: ErrorKind = ErrorKind.IO_ERROR


class PathNotFoundError(FileRepositoryError):
    """Exception raised when a path does not exist."""

    kind = ErrorKind.NOT_FOUND


class PathNotADirectoryError(FileRepositoryError):
    """Exception raised when a directory was expected."""

    kind = ErrorKind.NOT_A_DIRECTORY


class PathExistsError(FileRepositoryError):
    """Exception raised when a path that must not exist already does."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidPermissionFormatError(FileRepositoryError):
    """Exception raised for malformed octal permission strings."""

    kind = ErrorKind.INVALID_FORMAT


class MoveError(FileRepositoryError):
    """Exception raised when a rename fails."""

    kind = ErrorKind.MOVE_ERROR


class CopyError(FileRepositoryError):
    """Exception raised when a copy fails, possibly after copying part of a tree."""

    kind = ErrorKind.COPY_ERROR


class AccessDeniedError(FileRepositoryError):
    """Exception raised when permissions block a whole operation."""

    kind = ErrorKind.ACCESS_DENIED
