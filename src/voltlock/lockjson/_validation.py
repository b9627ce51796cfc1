"""Validation of lock.json contents.

Validation is fail-fast: the first violated invariant is raised and nothing
else is checked. Checks always run in the same order, so the reported error
for a given document is deterministic:

1. Missing or invalid fields (root, then each repos, then each profile).
2. Duplicate repos paths.
3. Duplicate profile names.
4. Duplicate repos paths within a profile.
5. The active profile exists.
6. Every profile repos path refers to a repos.
7. Every repos exists as a directory on the filesystem.
8. No repos has a transaction ID newer than the lock file's.

Filesystem checks run after all pure data checks, so a malformed document
never causes filesystem access.
"""

from typing import TYPE_CHECKING, Any

from voltlock.exceptions import (
    DanglingReferenceError,
    DuplicateError,
    FilesystemMismatchError,
    InvalidTypeError,
    LockValidationError,
    MissingFieldError,
    OrderingViolationError,
)
from voltlock.lockjson._models import LockJSON, ReposType

if TYPE_CHECKING:
    from voltlock.lockjson._models import Repos
    from voltlock.utils._paths import PathResolver


def _missing(field: str) -> MissingFieldError:
    return MissingFieldError(f"missing: {field}", field=field)


def _validate_repos_missing(index: int, repos: "Repos") -> None:
    prefix = f"repos[{index}]"
    if not repos.type:
        raise _missing(f"{prefix}.type")

    if repos.type not in (ReposType.GIT, ReposType.STATIC):
        msg = f"{prefix}.type is invalid type: {repos.type}"
        raise InvalidTypeError(msg, field=f"{prefix}.type", value=repos.type)

    # git repos need a version on top of the fields shared with static repos
    if repos.type == ReposType.GIT and not repos.version:
        raise _missing(f"{prefix}.version")
    if repos.trx_id == 0:
        raise _missing(f"{prefix}.trx_id")
    if not repos.path:
        raise _missing(f"{prefix}.path")


def validate_missing(lock_json: LockJSON) -> None:
    """Check that all required fields are present and well-formed.

    Args:
        lock_json: The lock file to check.

    Raises:
        MissingFieldError: If a required field is absent, zero or empty.
        InvalidTypeError: If a repos has an unknown type.
    """
    if lock_json.version == 0:
        raise _missing("version")
    if lock_json.trx_id == 0:
        raise _missing("trx_id")
    if lock_json.repos is None:
        raise _missing("repos")
    for i, repos in enumerate(lock_json.repos):
        _validate_repos_missing(i, repos)

    if lock_json.profiles is None:
        raise _missing("profiles")
    for i, profile in enumerate(lock_json.profiles):
        if not profile.name:
            raise _missing(f"profile[{i}].name")
        if profile.repos_path is None:
            raise _missing(f"profile[{i}].repos_path")
        for j, repos_path in enumerate(profile.repos_path):
            if not repos_path:
                raise _missing(f"profile[{i}].repos_path[{j}]")


def _validate_duplicates(lock_json: LockJSON) -> None:
    seen: set[str] = set()
    for i, repos in enumerate(lock_json.repos or ()):
        if repos.path in seen:
            field = f"repos[{i}].path"
            msg = f"duplicate repos '{repos.path}' ({field})"
            raise DuplicateError(msg, field=field, value=repos.path)
        seen.add(repos.path)

    seen = set()
    for i, profile in enumerate(lock_json.profiles or ()):
        if profile.name in seen:
            field = f"profiles[{i}].name"
            msg = f"duplicate profile '{profile.name}' ({field})"
            raise DuplicateError(msg, field=field, value=profile.name)
        seen.add(profile.name)

    for i, profile in enumerate(lock_json.profiles or ()):
        seen = set()
        for j, repos_path in enumerate(profile.repos_path or ()):
            if repos_path in seen:
                field = f"profiles[{i}].repos_path[{j}]"
                msg = f"duplicate '{repos_path}' ({field}) in profile '{profile.name}'"
                raise DuplicateError(
                    msg,
                    field=field,
                    value=repos_path,
                    profile=profile.name,
                )
            seen.add(repos_path)


def _validate_references(lock_json: LockJSON) -> None:
    profiles = lock_json.profiles or []
    if not any(profile.name == lock_json.active_profile for profile in profiles):
        msg = f"'{lock_json.active_profile}' (active_profile) doesn't exist in profiles"
        raise DanglingReferenceError(
            msg, field="active_profile", value=lock_json.active_profile
        )

    repos_paths = {repos.path for repos in lock_json.repos or ()}
    for i, profile in enumerate(profiles):
        for j, repos_path in enumerate(profile.repos_path or ()):
            if repos_path not in repos_paths:
                field = f"profiles[{i}].repos_path[{j}]"
                msg = f"'{repos_path}' ({field}) doesn't exist in repos"
                raise DanglingReferenceError(
                    msg, field=field, value=repos_path, profile_index=i, index=j
                )


def _validate_filesystem(lock_json: LockJSON, paths: "PathResolver") -> None:
    for i, repos in enumerate(lock_json.repos or ()):
        field = f"repos[{i}].path"
        full_path = paths.full_repos_path_of(repos.path)
        if not full_path.exists():
            msg = f"'{full_path}' ({field}) doesn't exist on filesystem"
            raise FilesystemMismatchError(
                msg, field=field, path=full_path, reason="missing", index=i
            )
        if not full_path.is_dir():
            msg = f"'{full_path}' ({field}) is not a directory"
            raise FilesystemMismatchError(
                msg, field=field, path=full_path, reason="not_directory", index=i
            )


def _validate_trx_id(lock_json: LockJSON) -> None:
    if not lock_json.repos:
        return

    # Strict "<" keeps the first repos on ties
    index = 0
    max_trx_id = lock_json.repos[0].trx_id
    for i, repos in enumerate(lock_json.repos):
        if max_trx_id < repos.trx_id:
            index = i
            max_trx_id = repos.trx_id

    if max_trx_id > lock_json.trx_id:
        field = f"repos[{index}].trx_id"
        msg = f"'{max_trx_id}' ({field}) is greater than '{lock_json.trx_id}' (trx_id)"
        raise OrderingViolationError(
            msg,
            field=field,
            index=index,
            repos_trx_id=max_trx_id,
            trx_id=lock_json.trx_id,
        )


def validate(lock_json: LockJSON, paths: "PathResolver") -> None:
    """Validate a lock file against all of its invariants.

    Args:
        lock_json: The lock file to validate.
        paths: Resolver used to locate repos directories.

    Raises:
        LockValidationError: The first violated invariant, as one of its
            subclasses.
    """
    validate_missing(lock_json)
    _validate_duplicates(lock_json)
    _validate_references(lock_json)
    _validate_filesystem(lock_json, paths)
    _validate_trx_id(lock_json)


def is_valid(lock_json: LockJSON, paths: "PathResolver") -> bool:
    """Check whether a lock file passes validation."""
    try:
        validate(lock_json, paths)
    except LockValidationError:
        return False
    return True


def get_lock_json_schema() -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Get the JSON Schema of the lock file document.

    Returns:
        JSON Schema dictionary for lock.json.

    Examples:
        >>> schema = get_lock_json_schema()
        >>> schema["title"]
        'LockJSON'
        >>> "repos" in schema["properties"]
        True
    """
    return LockJSON.model_json_schema()
