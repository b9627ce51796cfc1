# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false
"""Configuration validation using the Pydantic models."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from voltlock.config._models import VoltConfig
from voltlock.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a configuration validation issue.

    Attributes:
        key: Dotted path to the configuration key (e.g., "logging.level").
        message: Human-readable description of the issue.
        expected: Description of expected value or type, if available.
        actual: The actual value that caused the issue.
    """

    key: str
    message: str
    expected: str | None
    actual: Any


def _pydantic_error_to_issue(error: "ErrorDetails") -> ValidationIssue:
    """Convert a Pydantic error dict to a ValidationIssue."""
    key = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "Validation error"))

    ctx = error.get("ctx")
    expected: str | None = None
    if ctx is not None and "expected" in ctx:
        expected = str(ctx["expected"])

    return ValidationIssue(
        key=key,
        message=message,
        expected=expected,
        actual=error.get("input"),
    )


def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
    """Validate a merged configuration dictionary.

    Args:
        config: The merged configuration dictionary to validate.

    Returns:
        List of ValidationIssue objects. Empty list indicates valid config.
    """
    try:
        _ = VoltConfig.model_validate(config)
    except ValidationError as e:
        return [_pydantic_error_to_issue(err) for err in e.errors()]
    else:
        return []


def raise_if_validation_errors(issues: list[ValidationIssue]) -> None:
    """Raise ConfigValidationError for the first issue, if any.

    Args:
        issues: List of ValidationIssue objects to check.

    Raises:
        ConfigValidationError: If issues is non-empty.
    """
    if issues:
        issue = issues[0]
        msg = f"Invalid configuration value for '{issue.key}'"
        raise ConfigValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
        )
