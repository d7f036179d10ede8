"""Null checks -> $eq / $ne None. No parameters are consumed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..builder import PartialFilter

if TYPE_CHECKING:
    from ..conversion import ValueConverter
    from ..options import CompilerOptions
    from ..parameters import ParameterCursor


def compile_is_null(
    field: str,
    _parameters: ParameterCursor,
    _converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    # $eq None also matches documents without the field
    return PartialFilter(field, (("$eq", None),))


def compile_is_not_null(
    field: str,
    _parameters: ParameterCursor,
    _converter: ValueConverter,
    _options: CompilerOptions,
) -> PartialFilter:
    return PartialFilter(field, (("$ne", None),))
