from typing import Sequence

from sqlsandbox.core.models import Row
from sqlsandbox.core.schemas import QueryMetadata, QueryResult


def to_milliseconds(seconds: float) -> int:
    return int(round(seconds * 1000))


def format_result(rows: Sequence[Row], elapsed_seconds: float) -> QueryResult:
    """
    Wrap interpreter rows into the response shape.

    Columns come from the first row's fields, in declaration order. The
    highlight lists are reserved for the front-end and always empty here.
    """
    records = [row.model_dump() for row in rows]
    columns = list(records[0].keys()) if records else []

    return QueryResult(
        columns=columns,
        rows=records,
        metadata=QueryMetadata(
            execution_time=to_milliseconds(elapsed_seconds),
            highlighted_rows=[],
            highlighted_cells=[],
        ),
    )
