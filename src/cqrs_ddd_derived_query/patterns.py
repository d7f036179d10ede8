"""LIKE wildcard to MongoDB ``$regex`` translation."""

from __future__ import annotations

import re

WILDCARD = "*"


def to_like_regex(source: str, *, escape_literals: bool = False) -> str:
    """Translate a LIKE value into an unanchored regex pattern.

    Every ``*`` becomes ``.*``.  Other characters pass through untouched
    unless ``escape_literals`` is set, so ``J.n*`` matches ``Jan`` too.
    """
    if escape_literals:
        return ".*".join(re.escape(chunk) for chunk in source.split(WILDCARD))
    return source.replace(WILDCARD, ".*")
