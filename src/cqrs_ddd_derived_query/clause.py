"""
Clause model for derived queries.

A :class:`Clause` is one property comparison (``path`` + ``type``) taken
from a query method name, e.g. ``find_by_address_city_and_age_greater_than``
yields ``Clause(("address", "city"), EQUALS)`` and
``Clause(("age",), GREATER_THAN)``.  A :class:`ClauseTree` is the ordered
list of AND-groups the method name splits into at every ``Or``.

Both are produced by the query-method parser and are read-only here.
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .exceptions import InvalidClauseError
from .parts import PartType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class Clause:
    """
    One field comparison.

    Attributes:
        path: Property path segments (e.g. ``("address", "city")``).
        type: The comparison keyword.  Raw tags that are not a
            :class:`PartType` are kept as-is and rejected at compile time.
    """

    path: tuple[str, ...]
    type: PartType | str = PartType.EQUALS

    def __post_init__(self) -> None:
        path = (
            tuple(self.path.split("."))
            if isinstance(self.path, str)
            else tuple(self.path)
        )
        if not path or any(not segment for segment in path):
            raise InvalidClauseError(
                f"Clause path must have non-empty segments: {self.path!r}",
                path=".".join(path),
            )
        object.__setattr__(self, "path", path)
        if not isinstance(self.type, PartType):
            # unknown tags are kept for the compiler to reject
            with contextlib.suppress(ValueError):
                object.__setattr__(self, "type", PartType(self.type))

    @classmethod
    def of(cls, dot_path: str, type: PartType | str = PartType.EQUALS) -> Clause:
        """Create a clause from a dot-notation path."""
        return cls(path=tuple(dot_path.split(".")), type=type)

    @property
    def dot_path(self) -> str:
        return ".".join(self.path)

    @property
    def arity(self) -> int | None:
        """Parameters this clause consumes; ``None`` for an unknown tag."""
        if isinstance(self.type, PartType):
            return self.type.arity
        return None


@dataclass(frozen=True)
class ClauseTree:
    """Ordered AND-groups that are OR-ed together."""

    groups: tuple[tuple[Clause, ...], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        groups = tuple(tuple(group) for group in self.groups)
        for index, group in enumerate(groups):
            if not group:
                raise InvalidClauseError(
                    f"AND-group {index} is empty", path=f"groups[{index}]"
                )
        object.__setattr__(self, "groups", groups)

    @classmethod
    def of(cls, *groups: Iterable[Clause]) -> ClauseTree:
        return cls(groups=tuple(tuple(group) for group in groups))

    def __iter__(self) -> Iterator[tuple[Clause, ...]]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def total_arity(self) -> int:
        """Sum of the known arities of every clause in the tree."""
        return sum(clause.arity or 0 for group in self.groups for clause in group)
