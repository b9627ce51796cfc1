from typing import Any

from ._defaults import DEFAULT_CONFIG
from ._loader import deep_merge, parse_env_vars
from ._models import VoltConfig
from ._validation import raise_if_validation_errors, validate_config


def load_config(
    overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
    *,
    include_env: bool = True,
) -> VoltConfig:
    """Load configuration from defaults, environment and explicit overrides.

    Sources are merged in precedence order (defaults -> env -> overrides).

    Args:
        overrides: Explicit configuration values (highest precedence).
        include_env: Include environment variables as a source.

    Returns:
        The validated configuration.

    Raises:
        ConfigValidationError: If the merged configuration is invalid.
    """
    merged = DEFAULT_CONFIG
    if include_env:
        merged = deep_merge(merged, parse_env_vars())
    if overrides:
        merged = deep_merge(merged, overrides)

    raise_if_validation_errors(validate_config(merged))
    return VoltConfig.model_validate(merged)
