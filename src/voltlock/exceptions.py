"""voltlock exceptions."""

from pathlib import Path
from typing import Any, Literal


class VoltLockError(Exception):
    """Base exception for voltlock errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(VoltLockError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected


# =============================================================================
# Lock File Exceptions
# =============================================================================


class LockError(VoltLockError):
    """Base exception for lock file errors."""


class LockIOError(LockError):
    """Raised when the lock file or its directory cannot be read or written.

    Attributes:
        path: Path to the file or directory that caused the error.
        operation: The operation that failed ("read", "write", "mkdir").
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path,
        operation: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and I/O context.

        Args:
            message: Human-readable error message.
            path: Path to the file or directory that caused the error.
            operation: The operation that failed ("read", "write", "mkdir").
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.path: Path = path
        self.operation: str = operation
        self.cause: Exception | None = cause


class LockParseError(LockError):
    """Raised when lock file content does not have the expected shape.

    Attributes:
        path: Path to the file that failed to parse, if read from disk.
        key: Dotted path of the offending key, if known.
        cause: The underlying exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        key: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and parse context.

        Args:
            message: Human-readable error message.
            path: Path to the file that failed to parse.
            key: Dotted path of the offending key.
            cause: The underlying exception that caused this error.
        """
        super().__init__(message)
        self.path: Path | None = path
        self.key: str | None = key
        self.cause: Exception | None = cause


class LockValidationError(LockError, ValueError):
    """Raised when a lock file violates one of its invariants.

    Attributes:
        field: Field path of the offending value (e.g. "repos[2].version").
    """

    def __init__(self, message: str, *, field: str) -> None:
        """Initialize with error message and the offending field path."""
        super().__init__(message)
        self.field: str = field


class MissingFieldError(LockValidationError):
    """A required field is absent, zero or empty."""


class InvalidTypeError(LockValidationError):
    """A repos entry has a type outside of the known repos types.

    Attributes:
        value: The unrecognized type value.
    """

    def __init__(self, message: str, *, field: str, value: str) -> None:
        """Initialize with error message, field path and offending value."""
        super().__init__(message, field=field)
        self.value: str = value


class DuplicateError(LockValidationError):
    """A value that must be unique appears more than once.

    Attributes:
        value: The duplicated value.
        profile: Name of the profile holding the duplicate, for repos_path
            duplicates; None otherwise.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: str,
        profile: str | None = None,
    ) -> None:
        """Initialize with error message and duplicate context."""
        super().__init__(message, field=field)
        self.value: str = value
        self.profile: str | None = profile


class DanglingReferenceError(LockValidationError):
    """A name or path refers to something that does not exist.

    Attributes:
        value: The unresolved reference.
        profile_index: Index of the referring profile, if any.
        index: Index of the reference within the profile's repos_path.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: str,
        profile_index: int | None = None,
        index: int | None = None,
    ) -> None:
        """Initialize with error message and reference context."""
        super().__init__(message, field=field)
        self.value: str = value
        self.profile_index: int | None = profile_index
        self.index: int | None = index


class FilesystemMismatchError(LockValidationError):
    """A repos path does not exist on disk or is not a directory.

    Attributes:
        path: The resolved absolute path that was checked.
        reason: Either "missing" or "not_directory".
        index: Index of the repos entry.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        path: Path,
        reason: Literal["missing", "not_directory"],
        index: int,
    ) -> None:
        """Initialize with error message and filesystem context."""
        super().__init__(message, field=field)
        self.path: Path = path
        self.reason: Literal["missing", "not_directory"] = reason
        self.index: int = index


class OrderingViolationError(LockValidationError):
    """A repos transaction ID is newer than the lock file's transaction ID.

    Attributes:
        index: Index of the repos entry holding the maximum transaction ID.
        repos_trx_id: The repos transaction ID.
        trx_id: The lock file's transaction ID.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        index: int,
        repos_trx_id: int,
        trx_id: int,
    ) -> None:
        """Initialize with error message and ordering context."""
        super().__init__(message, field=field)
        self.index: int = index
        self.repos_trx_id: int = repos_trx_id
        self.trx_id: int = trx_id


# =============================================================================
# Lookup Exceptions
# =============================================================================


class LockNotFoundError(LockError, KeyError):
    """Base exception for failed lookups in a loaded lock file."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the message
        return str(self.args[0]) if self.args else ""


class ProfileNotFoundError(LockNotFoundError):
    """Raised when no profile has the requested name.

    Attributes:
        name: The profile name that was not found.
    """

    def __init__(self, message: str, *, name: str) -> None:
        """Initialize with error message and profile name."""
        super().__init__(message)
        self.name: str = name


class ReposNotFoundError(LockNotFoundError):
    """Raised when no repos entry has the requested path.

    Attributes:
        repos_path: The repos path that was not found.
    """

    def __init__(self, message: str, *, repos_path: str) -> None:
        """Initialize with error message and repos path."""
        super().__init__(message)
        self.repos_path: str = repos_path


class ReposPathNotFoundError(LockNotFoundError):
    """Raised when no profile lists the requested repos path.

    Attributes:
        repos_path: The repos path that was not found in any profile.
    """

    def __init__(self, message: str, *, repos_path: str) -> None:
        """Initialize with error message and repos path."""
        super().__init__(message)
        self.repos_path: str = repos_path
