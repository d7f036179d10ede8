"""
Sort specification handed through to the query executor.

The filter never encodes ordering; executors turn a :class:`Sort` into
driver sort tuples with :meth:`Sort.to_mongo`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .exceptions import InvalidSortError

if TYPE_CHECKING:
    from collections.abc import Iterator


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        raw = value.value if isinstance(value, Direction) else str(value)
        try:
            return cls(raw.lower())
        except ValueError:
            raise InvalidSortError(
                f"Unknown sort direction {value!r}; expected 'asc' or 'desc'"
            ) from None


@dataclass(frozen=True)
class Order:
    field: str
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class Sort:
    """Ordered ``(field, direction)`` pairs."""

    orders: tuple[Order, ...] = field(default_factory=tuple)

    @classmethod
    def by(cls, *fields: str) -> Sort:
        """Build from field names; a ``-`` prefix means descending."""
        orders = []
        for name in fields:
            if name.startswith("-"):
                orders.append(Order(name[1:], Direction.DESC))
            else:
                orders.append(Order(name, Direction.ASC))
        return cls(tuple(orders))

    @classmethod
    def of(cls, *pairs: tuple[str, Direction | str]) -> Sort:
        return cls(
            tuple(Order(name, Direction.parse(direction)) for name, direction in pairs)
        )

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __bool__(self) -> bool:
        return bool(self.orders)

    def to_mongo(self) -> list[tuple[str, int]]:
        """Return pymongo sort tuples, e.g. ``[("created_at", -1)]``."""
        return [
            (order.field, -1 if order.direction is Direction.DESC else 1)
            for order in self.orders
        ]
