"""
In-memory evaluation of compiled filters.

Evaluates the filter documents produced by :class:`DerivedQueryCreator`
against plain mappings with MongoDB matching semantics, which makes
compiled filters checkable without a server.  Each query operator is an
isolated :class:`FilterOperator` looked up in a registry; new operators
are added with ``register()``.

Semantics follow MongoDB for the supported subset:

* a missing field compares equal to ``None``;
* ``$gt``/``$lt`` only match values of the same type bracket
  (numbers, strings, datetimes, ...);
* an array field matches when any element matches;
* ``$regex`` is an unanchored ``re.search``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from bson import Decimal128

from .exceptions import UnsupportedOperatorError

_MISSING = object()
_ORDERED_BRACKETS = frozenset({"number", "string", "date", "bool"})


def _normalize(value: Any) -> Any:
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return value


def _bracket(value: Any) -> str:
    """MongoDB comparison bracket of ``value``."""
    value = _normalize(value)
    if value is None or value is _MISSING:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime):
        return "date"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _equals(field_value: Any, condition_value: Any) -> bool:
    if condition_value is None:
        return field_value is None or field_value is _MISSING
    if _bracket(field_value) != _bracket(condition_value):
        return False
    return bool(_normalize(field_value) == _normalize(condition_value))


def _candidates(field_value: Any) -> list[Any]:
    """The value itself plus, for arrays, each element."""
    if isinstance(field_value, list):
        return [field_value, *field_value]
    return [field_value]


class FilterOperator(ABC):
    """Strategy interface for one MongoDB query operator."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The ``$``-prefixed operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """
        Evaluate the operator against a resolved field value.

        Args:
            field_value: The value at the field path, or ``_MISSING``.
            condition_value: The operand from the filter document.
        """
        ...


class EqualOperator(FilterOperator):
    @property
    def name(self) -> str:
        return "$eq"

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return any(_equals(v, condition_value) for v in _candidates(field_value))


class NotEqualOperator(FilterOperator):
    @property
    def name(self) -> str:
        return "$ne"

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return not EqualOperator().evaluate(field_value, condition_value)


class _OrderingOperator(FilterOperator):
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        bracket = _bracket(condition_value)
        operand = _normalize(condition_value)
        return any(
            self._compare(_normalize(v), operand)
            for v in _candidates(field_value)
            if bracket in _ORDERED_BRACKETS and _bracket(v) == bracket
        )

    @abstractmethod
    def _compare(self, left: Any, right: Any) -> bool:
        ...


class GreaterThanOperator(_OrderingOperator):
    @property
    def name(self) -> str:
        return "$gt"

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left > right)


class LessThanOperator(_OrderingOperator):
    @property
    def name(self) -> str:
        return "$lt"

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left < right)


class RegexOperator(FilterOperator):
    @property
    def name(self) -> str:
        return "$regex"

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        pattern = (
            condition_value
            if isinstance(condition_value, re.Pattern)
            else re.compile(str(condition_value))
        )
        return any(
            isinstance(v, str) and pattern.search(v) is not None
            for v in _candidates(field_value)
        )


class FilterOperatorRegistry:
    """Registry of :class:`FilterOperator` instances keyed by operator name."""

    def __init__(self) -> None:
        self._operators: dict[str, FilterOperator] = {}

    def register(self, operator: FilterOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: FilterOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: str) -> FilterOperator | None:
        return self._operators.get(name)

    @property
    def supported_operators(self) -> set[str]:
        return set(self._operators)

    def evaluate(self, name: str, field_value: Any, condition_value: Any) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            UnsupportedOperatorError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise UnsupportedOperatorError(name, sorted(self._operators))
        return op.evaluate(field_value, condition_value)


def build_default_registry() -> FilterOperatorRegistry:
    """Create a registry with every operator the compiler emits."""
    registry = FilterOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        RegexOperator(),
    )
    return registry


def resolve_path(document: Mapping[str, Any], dot_path: str) -> Any:
    """Walk ``dot_path`` through nested mappings; ``_MISSING`` if absent."""
    current: Any = document
    for part in dot_path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


class FilterEvaluator:
    """Matches filter documents against in-memory documents."""

    def __init__(self, registry: FilterOperatorRegistry | None = None) -> None:
        self._registry = registry or build_default_registry()

    def matches(self, query: Mapping[str, Any], document: Mapping[str, Any]) -> bool:
        """True if ``document`` satisfies every top-level entry of ``query``."""
        return all(
            self._match_entry(key, condition, document)
            for key, condition in query.items()
        )

    def _match_entry(
        self, key: str, condition: Any, document: Mapping[str, Any]
    ) -> bool:
        if key == "$and":
            return all(self.matches(sub, document) for sub in condition)
        if key == "$or":
            return any(self.matches(sub, document) for sub in condition)
        value = resolve_path(document, key)
        if isinstance(condition, Mapping) and condition and all(
            str(op).startswith("$") for op in condition
        ):
            return all(
                self._registry.evaluate(op, value, operand)
                for op, operand in condition.items()
            )
        return self._registry.evaluate("$eq", value, condition)
