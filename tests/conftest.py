"""Shared fixtures for derived query tests."""

from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_derived_query import (
    DerivedQueryCreator,
    DocumentValueConverter,
    ValueHolder,
)


class RecordingConverter:
    """Identity converter that records every holder it receives."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def convert(self, holder: ValueHolder) -> dict[str, Any]:
        self.calls.append(holder.value)
        return {"value": holder.value, "_class": "ValueHolder"}


SAMPLE_DOCUMENTS: list[dict[str, Any]] = [
    {"_id": 1, "name": "Jon", "age": 30, "address": {"city": "Athens"}},
    {"_id": 2, "name": "Jasmin", "age": 17, "address": {"city": "Berlin"}},
    {"_id": 3, "name": "Alice", "age": 65, "nickname": "Al"},
    {"_id": 4, "name": "Jn", "age": None},
    {
        "_id": 5,
        "name": "Bob",
        "age": 40,
        "nickname": None,
        "address": {"city": "Athens"},
    },
    {"_id": 6, "name": "A.B. Jones", "age": 18},
]


@pytest.fixture
def converter() -> RecordingConverter:
    return RecordingConverter()


@pytest.fixture
def creator(converter: RecordingConverter) -> DerivedQueryCreator:
    return DerivedQueryCreator(converter)


@pytest.fixture
def document_creator() -> DerivedQueryCreator:
    """Creator wired to the default BSON converter."""
    return DerivedQueryCreator(DocumentValueConverter())


@pytest.fixture
def documents() -> list[dict[str, Any]]:
    return [dict(doc) for doc in SAMPLE_DOCUMENTS]

