"""voltlock configuration.

Example:
    >>> from voltlock.config import load_config
    >>> config = load_config({"logging": {"level": "debug"}}, include_env=False)
    >>> config.logging.level
    <LogLevel.DEBUG: 'debug'>
"""

from voltlock.exceptions import ConfigError, ConfigValidationError

from ._defaults import DEFAULT_CONFIG
from ._load import load_config
from ._loader import (
    VOLTPATH_ENV,
    copy_value,
    deep_merge,
    parse_env_vars,
    parse_string_value,
    set_nested_key,
)
from ._models import LogFormat, LoggingConfig, LogLevel, VoltConfig
from ._validation import ValidationIssue, raise_if_validation_errors, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "VOLTPATH_ENV",
    "ConfigError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ValidationIssue",
    "VoltConfig",
    "copy_value",
    "deep_merge",
    "load_config",
    "parse_env_vars",
    "parse_string_value",
    "raise_if_validation_errors",
    "set_nested_key",
    "validate_config",
]
