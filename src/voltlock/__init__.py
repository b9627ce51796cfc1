"""voltlock: consistency-checked lock file for volt repos and profiles."""

from voltlock.exceptions import (
    DanglingReferenceError,
    DuplicateError,
    FilesystemMismatchError,
    InvalidTypeError,
    LockError,
    LockIOError,
    LockNotFoundError,
    LockParseError,
    LockValidationError,
    MissingFieldError,
    OrderingViolationError,
    ProfileNotFoundError,
    ReposNotFoundError,
    ReposPathNotFoundError,
    VoltLockError,
)
from voltlock.lockjson import (
    LockJSON,
    LockStore,
    Profile,
    Repos,
    ReposType,
    initial_lock_json,
    load_lock_json,
    save_lock_json,
    validate,
)
from voltlock.utils._paths import PathResolver, VoltPaths

__all__ = [
    "DanglingReferenceError",
    "DuplicateError",
    "FilesystemMismatchError",
    "InvalidTypeError",
    "LockError",
    "LockIOError",
    "LockJSON",
    "LockNotFoundError",
    "LockParseError",
    "LockStore",
    "LockValidationError",
    "MissingFieldError",
    "OrderingViolationError",
    "PathResolver",
    "Profile",
    "ProfileNotFoundError",
    "Repos",
    "ReposNotFoundError",
    "ReposPathNotFoundError",
    "ReposType",
    "VoltLockError",
    "VoltPaths",
    "initial_lock_json",
    "load_lock_json",
    "save_lock_json",
    "validate",
]
