from __future__ import annotations

from enum import Enum


class PartType(str, Enum):
    """Comparison keywords a derived query clause can carry."""

    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    BETWEEN = "between"
    LIKE = "like"
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    @property
    def arity(self) -> int:
        """Number of bound parameters a clause of this type consumes."""
        return _ARITY[self]


_ARITY: dict[PartType, int] = {
    PartType.EQUALS: 1,
    PartType.NOT_EQUALS: 1,
    PartType.GREATER_THAN: 1,
    PartType.LESS_THAN: 1,
    PartType.BETWEEN: 2,
    PartType.LIKE: 1,
    PartType.IS_NULL: 0,
    PartType.IS_NOT_NULL: 0,
}
