"""
Derived query exception hierarchy.

All exceptions inherit from ``DerivedQueryError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class DerivedQueryError(Exception):
    """Base exception for all derived query compilation errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class UnsupportedOperatorError(DerivedQueryError):
    """
    A clause carries an operator tag outside the supported set.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: object, valid_operators: list[str]) -> None:
        self.operator = str(operator)
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(
            self.operator, valid_operators, n=3, cutoff=0.6
        )

        message = f"Unsupported operator: '{self.operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Supported operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class ParameterUnderflowError(DerivedQueryError):
    """The parameter cursor ran out before a clause got all of its values.

    This always points at a binding bug upstream: the caller bound fewer
    arguments than the clause tree declares.
    """

    def __init__(self, consumed: int, field: str | None = None) -> None:
        self.consumed = consumed
        self.field = field
        message = f"Parameter cursor exhausted after {consumed} value(s)"
        if field:
            message += f" while binding '{field}'"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PARAMETER_UNDERFLOW",
            "consumed": self.consumed,
            "field": self.field,
        }


class InvalidClauseError(DerivedQueryError):
    """Clause or clause tree structure is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_CLAUSE",
            "message": self.message,
            "path": self.path,
        }


class InvalidSortError(DerivedQueryError):
    """Raised when a sort direction cannot be interpreted."""
