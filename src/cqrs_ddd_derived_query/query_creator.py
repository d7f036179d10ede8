"""Clause tree -> MongoDB filter reduction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .builder import FilterBuilder, FilterExpression
from .compiler import ClauseCompiler
from .options import CompilerOptions

if TYPE_CHECKING:
    from .clause import Clause, ClauseTree
    from .conversion import ValueConverter
    from .parameters import ParameterCursor
    from .sort import Sort

_logger = logging.getLogger("cqrs_ddd.derived_query")


class DerivedQueryCreator:
    """
    Builds a MongoDB filter from a derived query's clause tree.

    Clauses inside an AND-group are conjoined left to right; groups are
    OR-ed in source order with the first group as base.  The creator keeps
    no per-call state, so one instance can serve concurrent callers as
    long as every call brings its own :class:`ParameterCursor`.

    Usage::

        creator = DerivedQueryCreator(DocumentValueConverter())
        tree = ClauseTree.of(
            [Clause.of("age", PartType.BETWEEN)],
            [Clause.of("name", PartType.LIKE)],
        )
        query = creator.create(tree, ParameterCursor([18, 65, "J*n"]))
        # {"$or": [{"age": {"$gt": 18, "$lt": 65}}, {"name": {"$regex": "J.*n"}}]}
    """

    def __init__(
        self,
        converter: ValueConverter,
        *,
        options: CompilerOptions | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._options = options or CompilerOptions()
        self._compiler = ClauseCompiler(converter, self._options)
        self._log = logger or _logger

    def create(
        self,
        tree: ClauseTree,
        parameters: ParameterCursor,
        sort: Sort | None = None,
    ) -> FilterExpression:
        """Compile ``tree`` into a finalized filter.

        Any error aborts the whole call; no partial filter is returned.
        """
        base: FilterBuilder | None = None
        for group in tree:
            criteria = self._reduce_group(group, parameters)
            base = criteria if base is None else self.or_(base, criteria)
        return self.complete(base, sort)

    def _reduce_group(
        self, group: tuple[Clause, ...], parameters: ParameterCursor
    ) -> FilterBuilder:
        first, *rest = group
        criteria = self.start(first, parameters)
        for clause in rest:
            criteria = self.and_(clause, criteria, parameters)
        return criteria

    def start(self, clause: Clause, parameters: ParameterCursor) -> FilterBuilder:
        """Open a new AND-group with ``clause``."""
        return FilterBuilder(self._compiler.compile(clause, parameters))

    def and_(
        self, clause: Clause, base: FilterBuilder, parameters: ParameterCursor
    ) -> FilterBuilder:
        return base.and_(self._compiler.compile(clause, parameters))

    def or_(self, base: FilterBuilder, criteria: FilterBuilder) -> FilterBuilder:
        return base.or_(criteria)

    def complete(
        self, criteria: FilterBuilder | None, sort: Sort | None = None
    ) -> FilterExpression:
        """Finalize the accumulated filter.

        ``sort`` is accepted for the executor's benefit and does not change
        the filter.
        """
        query = FilterExpression(criteria.get() if criteria is not None else None)
        if self._options.trace_queries and self._log.isEnabledFor(logging.DEBUG):
            self._log.debug("Created query %s", query.to_dict())
        return query
