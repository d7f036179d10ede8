from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerOptions:
    """
    Compiler settings, passed by constructor injection.

    Attributes:
        escape_like_literals: Escape regex metacharacters in LIKE values
            other than the ``*`` wildcard.  Off by default: ``a.c`` then
            also matches ``abc``.
        trace_queries: Emit a DEBUG record for every finalized filter.
    """

    escape_like_literals: bool = False
    trace_queries: bool = True
