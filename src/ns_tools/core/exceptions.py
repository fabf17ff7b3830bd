"""Exception hierarchy for ns-tools."""


class NSToolsError(Exception):
    """Base exception for all ns-tools errors."""

    pass


class ValidationError(NSToolsError):
    """Raised when user input fails validation."""

    pass


class FileSystemError(NSToolsError):
    """Raised by a file system client when a namespace operation fails."""

    pass


class FileDoesNotExistError(FileSystemError):
    """Raised when the target path does not exist in the namespace."""

    pass


class AccessControlError(FileSystemError):
    """Raised when the caller is not allowed to modify the path."""

    pass
