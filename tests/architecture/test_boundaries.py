from pytest_archon import archrule


def test_no_driver_dependency() -> None:
    """
    The compiler only produces filter documents.
    Issuing them is the executor's job, so no driver may be imported.
    """
    (
        archrule("no_driver")
        .match("cqrs_ddd_derived_query*")
        .should_not_import("pymongo*")
        .should_not_import("motor*")
        .check("cqrs_ddd_derived_query")
    )


def test_operators_layering() -> None:
    """
    Operator compilers build fragments only.
    They must not reach up into the clause compiler or the tree reducer.
    """
    (
        archrule("operators_layering")
        .match("cqrs_ddd_derived_query.operators*")
        .should_not_import("cqrs_ddd_derived_query.query_creator")
        .should_not_import("cqrs_ddd_derived_query.compiler")
        .check("cqrs_ddd_derived_query")
    )


def test_model_isolation() -> None:
    """
    The clause model is plain data.
    It must not depend on compilation, conversion or evaluation.
    """
    (
        archrule("model_isolation")
        .match("cqrs_ddd_derived_query.clause")
        .match("cqrs_ddd_derived_query.parts")
        .match("cqrs_ddd_derived_query.parameters")
        .should_not_import("cqrs_ddd_derived_query.compiler")
        .should_not_import("cqrs_ddd_derived_query.conversion")
        .should_not_import("cqrs_ddd_derived_query.evaluator")
        .should_not_import("pydantic*")
        .check("cqrs_ddd_derived_query")
    )
