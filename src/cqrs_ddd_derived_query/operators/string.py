"""LIKE keyword -> unanchored, case-sensitive $regex."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..builder import PartialFilter
from ..conversion import next_converted
from ..patterns import to_like_regex

if TYPE_CHECKING:
    from ..conversion import ValueConverter
    from ..options import CompilerOptions
    from ..parameters import ParameterCursor


def compile_like(
    field: str,
    parameters: ParameterCursor,
    converter: ValueConverter,
    options: CompilerOptions,
) -> PartialFilter:
    value = str(next_converted(parameters, converter, field))
    pattern = to_like_regex(value, escape_literals=options.escape_like_literals)
    return PartialFilter(field, (("$regex", pattern),))
