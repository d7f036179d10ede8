"""
Filter accumulation for derived queries.

:class:`PartialFilter` is the fragment one clause compiles to,
:class:`FilterBuilder` is the mutable per-group accumulator and
:class:`FilterExpression` is the immutable, driver-ready result.
Builders never leave the call that created them; only the finalized
expression is handed out.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .evaluator import FilterEvaluator

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class PartialFilter:
    """Conditions on one field, e.g. ``("age", (("$gt", 18), ("$lt", 65)))``."""

    field: str
    conditions: tuple[tuple[str, Any], ...]

    def to_document(self) -> dict[str, Any]:
        return {self.field: {op: copy.deepcopy(val) for op, val in self.conditions}}


class FilterBuilder:
    """Accumulates one AND-group and, as OR base, the groups after it."""

    __slots__ = ("_terms", "_alternatives")

    def __init__(self, partial: PartialFilter) -> None:
        self._terms: list[PartialFilter] = [partial]
        self._alternatives: list[dict[str, Any]] = []

    def and_(self, partial: PartialFilter) -> FilterBuilder:
        self._terms.append(partial)
        return self

    def or_(self, other: FilterBuilder) -> FilterBuilder:
        self._alternatives.append(other.conjunction())
        return self

    def conjunction(self) -> dict[str, Any]:
        """Render the AND-group.

        Distinct fields merge into one document; a repeated field falls
        back to ``$and`` so no condition overwrites another.
        """
        if len(self._terms) == 1:
            return self._terms[0].to_document()
        fields = [term.field for term in self._terms]
        if len(set(fields)) == len(fields):
            merged: dict[str, Any] = {}
            for term in self._terms:
                merged.update(term.to_document())
            return merged
        return {"$and": [term.to_document() for term in self._terms]}

    def get(self) -> dict[str, Any]:
        base = self.conjunction()
        if not self._alternatives:
            return base
        return {"$or": [base, *copy.deepcopy(self._alternatives)]}


class FilterExpression(Mapping[str, Any]):
    """
    Immutable MongoDB filter document.

    Behaves as a read-only mapping so it can be passed straight to
    ``collection.find()``.  Reads return copies; the stored document is
    never exposed.
    """

    __slots__ = ("_document",)

    def __init__(self, document: Mapping[str, Any] | None = None) -> None:
        self._document: dict[str, Any] = copy.deepcopy(dict(document or {}))

    def __getitem__(self, key: str) -> Any:
        return copy.deepcopy(self._document[key])

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._document))

    def __len__(self) -> int:
        return len(self._document)

    def __repr__(self) -> str:
        return f"FilterExpression({self._document!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the filter document."""
        return copy.deepcopy(self._document)

    def matches(self, document: Mapping[str, Any]) -> bool:
        """Evaluate this filter against ``document`` in memory."""
        return FilterEvaluator().matches(self._document, document)
