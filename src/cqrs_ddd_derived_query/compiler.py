"""Clause -> MongoDB filter fragment compilation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import UnsupportedOperatorError
from .operators import PART_COMPILERS
from .options import CompilerOptions
from .parts import PartType

if TYPE_CHECKING:
    from .builder import PartialFilter
    from .clause import Clause
    from .conversion import ValueConverter
    from .parameters import ParameterCursor


class ClauseCompiler:
    """Compiles one clause, consuming its arity from the parameter cursor."""

    def __init__(
        self,
        converter: ValueConverter,
        options: CompilerOptions | None = None,
    ) -> None:
        self._converter = converter
        self._options = options or CompilerOptions()

    def compile(self, clause: Clause, parameters: ParameterCursor) -> PartialFilter:
        """Compile ``clause`` into a fragment keyed by its dot path.

        Raises:
            UnsupportedOperatorError: The clause type has no compiler.
                Nothing is consumed from ``parameters`` in that case.
            ParameterUnderflowError: ``parameters`` ran out mid-clause.
        """
        part_compiler = (
            PART_COMPILERS.get(clause.type)
            if isinstance(clause.type, PartType)
            else None
        )
        if part_compiler is None:
            raise UnsupportedOperatorError(
                clause.type, [part.value for part in PART_COMPILERS]
            )
        return part_compiler(
            clause.dot_path, parameters, self._converter, self._options
        )
