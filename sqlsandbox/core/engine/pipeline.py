import logging
import time
from typing import Any

from sqlsandbox.core.database import Dataset
from sqlsandbox.core.engine import formatter, safety
from sqlsandbox.core.engine.interpreter import QueryInterpreter
from sqlsandbox.core.exceptions import (
    QueryExecutionError,
    QueryValidationError,
)
from sqlsandbox.core.schemas import QueryResult


# -----------------------------------------------------------------------------
# PIPELINE MODULE - Orchestration
# Purpose: validate -> safety check -> interpret (timed) -> format
# Each step either passes the query on or raises a QueryError subclass.
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)


def validate_query(query: Any) -> str:
    if not query:
        raise QueryValidationError()
    if not isinstance(query, str):
        raise QueryValidationError("Query must be a string")
    return query


def run_query(
    query: Any, dataset: Dataset, default_limit: int = 10
) -> QueryResult:
    """
    Run one sandbox query end to end.

    Args:
        query: Raw text from the caller.
        dataset: The seeded relations.
        default_limit: Users returned when no shape matches.

    Raises:
        QueryValidationError: query is missing, empty or not a string.
        SafetyRejection: query contains a disallowed keyword.
        QueryExecutionError: anything else failed while producing rows.

    Example:
        result = run_query("select * from users", dataset)
    """
    query = validate_query(query)
    safety.check_query(query)

    interpreter = QueryInterpreter(dataset, default_limit=default_limit)

    start = time.perf_counter()
    try:
        interpretation = interpreter.interpret(query)
    except Exception as error:
        raise QueryExecutionError(str(error)) from error
    elapsed = time.perf_counter() - start

    logger.info(
        f"Query matched {interpretation.rule}: {len(interpretation.rows)} rows "
        f"in {formatter.to_milliseconds(elapsed)} ms"
    )
    return formatter.format_result(interpretation.rows, elapsed)
