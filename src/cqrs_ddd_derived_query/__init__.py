"""Derived query compilation for MongoDB.

Turns the clause tree of a query method (``find_by_name_like_or_age_between``)
plus its bound arguments into an immutable MongoDB filter document.
"""

from __future__ import annotations

from .builder import FilterBuilder, FilterExpression, PartialFilter
from .clause import Clause, ClauseTree
from .compiler import ClauseCompiler
from .conversion import (
    DocumentValueConverter,
    ValueConverter,
    ValueHolder,
    read_converted_value,
)
from .evaluator import FilterEvaluator, FilterOperatorRegistry, build_default_registry
from .exceptions import (
    DerivedQueryError,
    InvalidClauseError,
    InvalidSortError,
    ParameterUnderflowError,
    UnsupportedOperatorError,
)
from .options import CompilerOptions
from .parameters import ParameterCursor
from .parts import PartType
from .patterns import to_like_regex
from .query_creator import DerivedQueryCreator
from .sort import Direction, Order, Sort

__all__ = [
    # Model
    "PartType",
    "Clause",
    "ClauseTree",
    "ParameterCursor",
    "Sort",
    "Order",
    "Direction",
    # Compilation
    "DerivedQueryCreator",
    "ClauseCompiler",
    "CompilerOptions",
    "FilterBuilder",
    "FilterExpression",
    "PartialFilter",
    # Conversion
    "ValueConverter",
    "ValueHolder",
    "DocumentValueConverter",
    "read_converted_value",
    # In-memory evaluation
    "FilterEvaluator",
    "FilterOperatorRegistry",
    "build_default_registry",
    # Utilities
    "to_like_regex",
    # Exceptions
    "DerivedQueryError",
    "UnsupportedOperatorError",
    "ParameterUnderflowError",
    "InvalidClauseError",
    "InvalidSortError",
]
