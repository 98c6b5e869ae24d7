import pytest

from sqlsandbox.core.engine import formatter, pipeline
from sqlsandbox.core.exceptions import (
    QueryError,
    QueryExecutionError,
    QueryValidationError,
    SafetyRejection,
)


def test_format_result_columns_follow_first_row(sample_dataset):
    result = formatter.format_result(sample_dataset.products[:2], 0.0123)

    assert result.columns == [
        "id",
        "name",
        "description",
        "price",
        "category_id",
        "created_at",
    ]
    assert result.rows == [row.model_dump() for row in sample_dataset.products[:2]]
    assert result.metadata.execution_time == 12


def test_format_result_empty_rows():
    result = formatter.format_result([], 0.0)
    assert result.columns == []
    assert result.rows == []


def test_format_result_metadata_aliases(sample_dataset):
    result = formatter.format_result(sample_dataset.categories, 0.0016)
    dumped = result.model_dump(by_alias=True)

    assert dumped["metadata"] == {
        "executionTime": 2,
        "highlightedRows": [],
        "highlightedCells": [],
    }


def test_to_milliseconds_rounds():
    assert formatter.to_milliseconds(0.0004) == 0
    assert formatter.to_milliseconds(0.0016) == 2
    assert formatter.to_milliseconds(1.25) == 1250


def test_run_query_success(sample_dataset):
    result = pipeline.run_query("select * from users", sample_dataset)

    assert result.columns == ["id", "name", "email", "age", "created_at"]
    assert len(result.rows) == 12
    assert result.metadata.execution_time >= 0
    assert result.metadata.highlighted_rows == []
    assert result.metadata.highlighted_cells == []


def test_run_query_default_limit(sample_dataset):
    result = pipeline.run_query("foobar", sample_dataset, default_limit=4)
    assert [row["id"] for row in result.rows] == [1, 2, 3, 4]


@pytest.mark.parametrize("query", ["", None])
def test_empty_query_is_validation_error(sample_dataset, query):
    with pytest.raises(QueryValidationError) as excinfo:
        pipeline.run_query(query, sample_dataset)
    assert str(excinfo.value) == "Query is required"


def test_validation_happens_before_safety_check(sample_dataset, monkeypatch):
    calls = []
    monkeypatch.setattr(pipeline.safety, "check_query", calls.append)

    with pytest.raises(QueryValidationError):
        pipeline.run_query("", sample_dataset)
    assert calls == []


def test_harmful_query_is_rejected_before_interpreting(sample_dataset, monkeypatch):
    def fail(self, query):
        raise AssertionError("interpreter should not run")

    monkeypatch.setattr(pipeline.QueryInterpreter, "interpret", fail)

    with pytest.raises(SafetyRejection):
        pipeline.run_query("select * from users; DROP TABLE users", sample_dataset)


def test_unexpected_failure_becomes_execution_error(sample_dataset, monkeypatch):
    def boom(self, query):
        raise ValueError("boom")

    monkeypatch.setattr(pipeline.QueryInterpreter, "interpret", boom)

    with pytest.raises(QueryExecutionError) as excinfo:
        pipeline.run_query("select * from users", sample_dataset)
    assert str(excinfo.value) == "boom"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_dataset_still_usable_after_failures(sample_dataset):
    for query in ["", "drop table users"]:
        with pytest.raises(QueryError):
            pipeline.run_query(query, sample_dataset)

    result = pipeline.run_query("select * from categories", sample_dataset)
    assert len(result.rows) == 2


@pytest.mark.parametrize("query", [123, ["select * from users"], {"q": 1}])
def test_non_string_query_is_validation_error(sample_dataset, query):
    with pytest.raises(QueryValidationError) as excinfo:
        pipeline.run_query(query, sample_dataset)
    assert str(excinfo.value) == "Query must be a string"


def test_huge_number_is_not_an_execution_error(sample_dataset):
    result = pipeline.run_query("show users where age > " + "9" * 5000, sample_dataset)
    assert result.rows == []
