"""Tests for ParameterCursor."""

from __future__ import annotations

import pytest

from cqrs_ddd_derived_query import ParameterCursor, ParameterUnderflowError


def test_values_are_returned_in_order() -> None:
    cursor = ParameterCursor(iter([1, "two", None]))
    assert cursor.next() == 1
    assert cursor.next() == "two"
    assert cursor.next() is None
    assert cursor.consumed == 3
    assert cursor.remaining == 0


def test_underflow_raises() -> None:
    cursor = ParameterCursor([1])
    cursor.next()
    with pytest.raises(ParameterUnderflowError) as exc_info:
        cursor.next("age")
    assert exc_info.value.consumed == 1
    assert exc_info.value.field == "age"
    assert "age" in str(exc_info.value)


def test_underflow_does_not_advance() -> None:
    cursor = ParameterCursor([])
    with pytest.raises(ParameterUnderflowError):
        cursor.next()
    assert cursor.consumed == 0


def test_repr() -> None:
    cursor = ParameterCursor([1, 2])
    cursor.next()
    assert repr(cursor) == "ParameterCursor(consumed=1, remaining=1)"
