"""Compiled filters select the same documents in mongomock and in memory."""

from __future__ import annotations

import mongomock
import pytest

from cqrs_ddd_derived_query import Clause, ClauseTree, ParameterCursor, PartType

PEOPLE = [
    {"_id": 1, "name": "Jon", "age": 30, "address": {"city": "Athens"}},
    {"_id": 2, "name": "Jasmin", "age": 17, "address": {"city": "Berlin"}},
    {"_id": 3, "name": "Alice", "age": 65, "nickname": "Al"},
    {"_id": 4, "name": "Jn", "age": 52, "nickname": None},
    {"_id": 5, "name": "Bob", "age": 40, "address": {"city": "Athens"}},
    {"_id": 6, "name": "A.B. Jones", "age": 18},
]


@pytest.fixture
def people():
    collection = mongomock.MongoClient().db.people
    collection.insert_many([dict(doc) for doc in PEOPLE])
    return collection


CASES = [
    pytest.param(
        ClauseTree.of([Clause.of("age")]),
        [30],
        {1},
        id="equals",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("age", PartType.BETWEEN)]),
        [18, 65],
        {1, 4, 5},
        id="between-exclusive",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("name", PartType.LIKE)]),
        ["J*n"],
        {1, 2, 4, 6},
        id="like-unanchored",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("name", PartType.LIKE)]),
        ["A.B"],
        {6},
        id="like-dot-passthrough",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("nickname", PartType.IS_NULL)]),
        [],
        {1, 2, 4, 5, 6},
        id="is-null",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("nickname", PartType.IS_NOT_NULL)]),
        [],
        {3},
        id="is-not-null",
    ),
    pytest.param(
        ClauseTree.of([Clause.of("address.city", PartType.NOT_EQUALS)]),
        ["Athens"],
        {2, 3, 4, 6},
        id="not-equals-nested",
    ),
    pytest.param(
        ClauseTree.of(
            [Clause.of("address.city"), Clause.of("age", PartType.LESS_THAN)],
            [Clause.of("age", PartType.GREATER_THAN)],
        ),
        ["Athens", 35, 60],
        {1, 3},
        id="and-or",
    ),
    pytest.param(
        ClauseTree.of(
            [
                Clause.of("age", PartType.GREATER_THAN),
                Clause.of("age", PartType.NOT_EQUALS),
            ]
        ),
        [20, 40],
        {1, 3, 4},
        id="repeated-field",
    ),
]


@pytest.mark.parametrize(("tree", "values", "expected"), CASES)
def test_same_documents_selected(creator, people, tree, values, expected) -> None:
    query = creator.create(tree, ParameterCursor(values))

    from_store = {doc["_id"] for doc in people.find(query.to_dict())}
    in_memory = {doc["_id"] for doc in PEOPLE if query.matches(doc)}

    assert from_store == expected
    assert in_memory == expected


def test_document_converter_output_is_queryable(document_creator, people) -> None:
    tree = ClauseTree.of([Clause.of("address", PartType.EQUALS)])
    query = document_creator.create(tree, ParameterCursor([{"city": "Berlin"}]))
    assert [doc["_id"] for doc in people.find(query.to_dict())] == [2]
