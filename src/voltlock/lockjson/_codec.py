# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""JSON encoding and decoding of lock.json."""

from pathlib import Path

import orjson
from pydantic import ValidationError

from voltlock.exceptions import LockParseError
from voltlock.lockjson._models import LockJSON


def loads_lock_json(content: bytes | str, *, path: Path | None = None) -> LockJSON:
    """Parse lock file content into a LockJSON.

    Only the document shape is checked here; invariants are checked by
    validation.

    Args:
        content: Raw JSON content.
        path: Path the content was read from, for error reporting.

    Returns:
        The parsed, unvalidated lock file.

    Raises:
        LockParseError: If the content is not valid JSON, not an object, or
            a field has the wrong JSON type.
    """
    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise LockParseError(msg, path=path, cause=e) from e

    if not isinstance(data, dict):
        msg = f"Expected JSON object, got {type(data).__name__}"
        raise LockParseError(msg, path=path)

    try:
        return LockJSON.model_validate(data)
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error.get("loc", ()))
        msg = f"Invalid value for '{key}': {error.get('msg', 'validation error')}"
        raise LockParseError(msg, path=path, key=key, cause=e) from e


def dumps_lock_json(lock_json: LockJSON) -> bytes:
    """Serialize a LockJSON to indented JSON.

    Keys are written in declaration order with 2-space indentation.

    Args:
        lock_json: The lock file to serialize.

    Returns:
        UTF-8 encoded JSON.
    """
    return orjson.dumps(lock_json.model_dump(mode="json"), option=orjson.OPT_INDENT_2)
