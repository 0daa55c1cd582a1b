"""Custom exceptions for graphcore.

Provides a hierarchy of exceptions with stable error codes
and structured error payloads.
"""

from typing import Any


class GraphCoreError(Exception):
    """Base exception for all graphcore errors."""

    error_code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize exception with optional details.

        Args:
            message: Human-readable error message.
            details: Additional error details for debugging.
            cause: Original exception that caused this error.
        """
        self.message = message or self.message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# Caller errors
class InvalidArgumentError(GraphCoreError):
    """An argument violates an operation's precondition."""

    error_code = "INVALID_ARGUMENT"
    message = "Invalid argument"


class NodeNotInGraphError(InvalidArgumentError):
    """Node does not belong to this graph."""

    error_code = "NODE_NOT_IN_GRAPH"
    message = "Node does not belong to this graph"


class NegativeWeightError(InvalidArgumentError):
    """Negative edge weight where only non-negative weights are valid."""

    error_code = "NEGATIVE_WEIGHT"
    message = "Negative edge weights are not supported"


# Search errors
class SearchBudgetExceededError(GraphCoreError):
    """Search stopped after exhausting its expansion budget."""

    error_code = "SEARCH_BUDGET_EXCEEDED"
    message = "Search expansion budget exceeded"
