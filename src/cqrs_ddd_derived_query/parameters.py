"""Forward-only cursor over already-bound query method arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .exceptions import ParameterUnderflowError

if TYPE_CHECKING:
    from collections.abc import Iterable


class ParameterCursor:
    """
    Ordered, single-pass source of bound parameter values.

    Each clause takes exactly its arity from the front.  A cursor belongs
    to one compile call; concurrent compiles need their own instances.
    """

    __slots__ = ("_values", "_position")

    def __init__(self, values: Iterable[Any]) -> None:
        self._values = tuple(values)
        self._position = 0

    def next(self, field: str | None = None) -> Any:
        """Return the next value.

        Raises:
            ParameterUnderflowError: If no value is left.
        """
        if self._position >= len(self._values):
            raise ParameterUnderflowError(self._position, field)
        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def consumed(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def __repr__(self) -> str:
        return f"ParameterCursor(consumed={self.consumed}, remaining={self.remaining})"
