"""Comparison keywords -> $eq, $ne, $gt, $lt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..builder import PartialFilter
from ..conversion import next_converted

if TYPE_CHECKING:
    from ..conversion import ValueConverter
    from ..options import CompilerOptions
    from ..parameters import ParameterCursor


def compile_equals(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    value = next_converted(parameters, converter, field)
    return PartialFilter(field, (("$eq", value),))


def compile_not_equals(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    value = next_converted(parameters, converter, field)
    return PartialFilter(field, (("$ne", value),))


def compile_greater_than(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    value = next_converted(parameters, converter, field)
    return PartialFilter(field, (("$gt", value),))


def compile_less_than(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    value = next_converted(parameters, converter, field)
    return PartialFilter(field, (("$lt", value),))


def compile_between(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    """Exclusive range; the lower bound is bound first."""
    lower = next_converted(parameters, converter, field)
    upper = next_converted(parameters, converter, field)
    return PartialFilter(field, (("$gt", lower), ("$lt", upper)))
