"""
Indicator precondition errors.

Raised before any computation starts. Never retried; callers surface the
message as-is.
"""

import numbers


class IndicatorError(ValueError):
    """Base class for indicator precondition failures."""


class InsufficientDataError(IndicatorError):
    """Raised when the aligned series has fewer bars than required."""

    def __init__(self, required: int, actual: int, message: str | None = None):
        self.required = required
        self.actual = actual
        super().__init__(
            message
            or (
                "Not enough data for volume profile analysis after aligning array lengths "
                f"(need {required}, got {actual})"
            )
        )


class InvalidConfigurationError(IndicatorError):
    """Raised when an indicator parameter is out of range."""

    def __init__(self, name: str, value: object, reason: str = "must be a positive integer"):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value!r} ({reason})")


def require_positive_int(name: str, value: object) -> None:
    """
    Check a period-like parameter.

    Booleans are rejected even though bool is an Integral subclass.

    Raises:
        InvalidConfigurationError: If value is not an integer greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidConfigurationError(name, value)
