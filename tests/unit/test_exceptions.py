# pyright: reportAny=false
"""Unit tests for voltlock exceptions.

These tests verify that exception constructors correctly store context
attributes and that the error kinds stay distinguishable.
"""

from pathlib import Path

import pytest

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
)


class TestLockIOError:
    def test_stores_io_context(self) -> None:
        cause = OSError("disk full")
        error = LockIOError(
            "Failed to write", path=Path("/volt/lock.json"), operation="write", cause=cause
        )

        assert error.path == Path("/volt/lock.json")
        assert error.operation == "write"
        assert error.cause is cause


class TestLockParseError:
    def test_context_fields_default_to_none(self) -> None:
        error = LockParseError("Invalid JSON")

        assert error.path is None
        assert error.key is None
        assert error.cause is None


class TestLockValidationErrors:
    @pytest.mark.parametrize(
        "error",
        [
            MissingFieldError("missing: version", field="version"),
            InvalidTypeError("bad", field="repos[0].type", value="svn"),
            DuplicateError("dup", field="repos[1].path", value="a"),
            DanglingReferenceError("dangling", field="active_profile", value="x"),
            FilesystemMismatchError(
                "fs", field="repos[0].path", path=Path("/r"), reason="missing", index=0
            ),
            OrderingViolationError(
                "order", field="repos[0].trx_id", index=0, repos_trx_id=2, trx_id=1
            ),
        ],
    )
    def test_kinds_are_validation_errors(self, error: LockValidationError) -> None:
        assert isinstance(error, LockValidationError)
        assert not isinstance(error, (LockIOError, LockParseError))

    def test_io_and_parse_errors_are_not_validation_errors(self) -> None:
        assert not issubclass(LockIOError, LockValidationError)
        assert not issubclass(LockParseError, LockValidationError)
        assert not issubclass(LockParseError, LockIOError)

    def test_dangling_reference_stores_indices(self) -> None:
        error = DanglingReferenceError(
            "dangling", field="profiles[1].repos_path[2]", value="a", profile_index=1, index=2
        )

        assert error.field == "profiles[1].repos_path[2]"
        assert error.profile_index == 1
        assert error.index == 2


class TestNotFoundErrors:
    @pytest.mark.parametrize(
        "error",
        [
            ProfileNotFoundError("profile 'x' does not exist", name="x"),
            ReposNotFoundError("repos 'x' does not exist", repos_path="x"),
            ReposPathNotFoundError("no matching profiles[]/repos_path[]: x", repos_path="x"),
        ],
    )
    def test_are_key_errors_with_plain_message(self, error: LockNotFoundError) -> None:
        assert isinstance(error, KeyError)
        assert isinstance(error, LockError)
        assert str(error) == error.args[0]
