"""Per-keyword clause compilers for MongoDB filters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..parts import PartType
from .null import compile_is_not_null, compile_is_null
from .standard import (
    compile_between,
    compile_equals,
    compile_greater_than,
    compile_less_than,
    compile_not_equals,
)
from .string import compile_like

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..builder import PartialFilter
    from ..conversion import ValueConverter
    from ..options import CompilerOptions
    from ..parameters import ParameterCursor

    PartCompiler = Callable[
        [str, ParameterCursor, ValueConverter, CompilerOptions], PartialFilter
    ]

PART_COMPILERS: dict[PartType, PartCompiler] = {
    PartType.GREATER_THAN: compile_greater_than,
    PartType.LESS_THAN: compile_less_than,
    PartType.BETWEEN: compile_between,
    PartType.IS_NOT_NULL: compile_is_not_null,
    PartType.IS_NULL: compile_is_null,
    PartType.LIKE: compile_like,
    PartType.EQUALS: compile_equals,
    PartType.NOT_EQUALS: compile_not_equals,
}

__all__ = [
    "PART_COMPILERS",
    "compile_between",
    "compile_equals",
    "compile_greater_than",
    "compile_is_not_null",
    "compile_is_null",
    "compile_less_than",
    "compile_like",
    "compile_not_equals",
]
