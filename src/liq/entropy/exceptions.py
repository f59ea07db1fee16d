"""Custom exceptions for entropy computations.

Degenerate data never raises: engines report it through NaN / +inf
results. These exceptions cover invalid parameters and the statistics
helpers, which have no sentinel value to fall back on.
"""

from __future__ import annotations

from typing import Any


class EntropyError(Exception):
    """Base exception for entropy errors.

    Attributes:
        message: Human-readable error message.
        context: Additional context dictionary.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize entropy error.

        Args:
            message: Human-readable error message.
            context: Additional context for debugging.
        """
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context."""
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class InsufficientDataError(EntropyError):
    """Raised when a series is too short for a statistic.

    This occurs when:
    - The mean of an empty series is requested
    - The sample standard deviation of fewer than 2 points is requested

    Attributes:
        required: Minimum required series length.
        actual: Actual series length.
    """

    def __init__(
        self,
        message: str,
        required: int,
        actual: int,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.required = required
        self.actual = actual
        full_context = {"required": required, "actual": actual}
        if context:
            full_context.update(context)
        super().__init__(message, full_context)


class ConfigurationError(EntropyError):
    """Raised when a parameter is invalid.

    This occurs when:
    - Embedding dimension m is not a positive integer
    - Tolerance ratio r is negative or not finite
    - Scale factors are empty or contain values below 1
    - A binary series contains values other than 0 and 1

    Attributes:
        parameter: Parameter name that is invalid.
        value: Invalid value provided.
        valid_range: Description of valid values.
    """

    def __init__(
        self,
        message: str,
        parameter: str,
        value: Any,
        valid_range: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.parameter = parameter
        self.value = value
        self.valid_range = valid_range
        full_context = {"parameter": parameter, "value": value}
        if valid_range is not None:
            full_context["valid_range"] = valid_range
        if context:
            full_context.update(context)
        super().__init__(message, full_context)
