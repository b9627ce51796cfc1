# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration merging and environment variable parsing."""

import json
import os
from typing import Any

# Environment variable naming the volt root directory
VOLTPATH_ENV = "VOLTPATH"


def deep_merge(
    base: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    override: dict[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Deep merge two configuration dictionaries.

    Merges `override` into `base`, returning a new dictionary. Neither input
    is modified.

    Args:
        base: Base configuration (lower precedence).
        override: Override configuration (higher precedence).

    Returns:
        Merged configuration dictionary.

    Merge rules:
        - Dictionaries are recursively merged
        - Arrays are replaced entirely (no element-wise merge)
        - Scalars are replaced with override value
        - Missing keys in override preserve base values
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for key in base.keys() | override.keys():
        if key not in override:
            result[key] = copy_value(base[key])
        elif key not in base:
            result[key] = copy_value(override[key])
        else:
            base_val = base[key]
            override_val = override[key]

            if isinstance(base_val, dict) and isinstance(override_val, dict):
                result[key] = deep_merge(base_val, override_val)
            else:
                # Type mismatch or non-dicts - override wins
                result[key] = copy_value(override_val)

    return result


def copy_value(value: Any) -> Any:  # pyright: ignore[reportExplicitAny]
    """Create a deep copy of a configuration value.

    Args:
        value: The value to copy.

    Returns:
        A copy of the value, fully independent of the original.
    """
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def parse_env_vars(
    prefix: str = "VOLT_",
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into config dictionary.

    ``VOLTPATH`` maps to ``volt_path``. Other variables use the prefix:

        - Add prefix (VOLT_)
        - Convert to uppercase
        - Replace dots with double underscores
        - Example: logging.level -> VOLT_LOGGING__LEVEL

    ``VOLT_DEBUG`` is reserved for forcing debug logging and is not a
    configuration key.

    Args:
        prefix: Environment variable prefix (default: "VOLT_").

    Returns:
        Dictionary of parsed config values with nested structure.
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    volt_path = os.environ.get(VOLTPATH_ENV)
    if volt_path:
        result["volt_path"] = volt_path

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue

        config_key = key[len(prefix) :]
        if not config_key or config_key == "DEBUG":
            continue

        # VOLT_LOGGING__LEVEL -> logging.level
        config_path = config_key.replace("__", ".").lower()
        set_nested_key(result, config_path, parse_string_value(value))

    return result


def parse_string_value(value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Parse a string value with automatic type inference.

    Precedence:
    1. Boolean: true/false (case-insensitive)
    2. Integer: parseable as int (no decimal)
    3. Float: parseable as float (with decimal)
    4. JSON array/object: starts with [ or {
    5. String: fallback

    Args:
        value: Raw string value to parse.

    Returns:
        Parsed value with inferred type.

    Examples:
        >>> parse_string_value("true")
        True
        >>> parse_string_value("42")
        42
        >>> parse_string_value("debug")
        'debug'
    """
    lower_value = value.lower()
    if lower_value in ("true", "false"):
        return lower_value == "true"

    try:
        int_val = int(value)
        if "." not in value:
            return int_val
    except ValueError:
        pass

    if "." in value:
        try:
            return float(value)
        except ValueError:
            pass

    if (value.startswith("[") and value.endswith("]")) or (
        value.startswith("{") and value.endswith("}")
    ):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def set_nested_key(
    d: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Set a value at a dotted key path in a nested dictionary.

    Creates intermediate dictionaries as needed.

    Args:
        d: The dictionary to modify.
        key_path: Dotted key path (e.g., "logging.level").
        value: The value to set.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    parts = key_path.split(".")
    current = d

    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value
