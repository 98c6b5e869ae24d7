from typing import Sequence


class QueryError(Exception):
    """Base class for every failure raised while running a sandbox query."""


class QueryValidationError(QueryError):
    """The query text is missing or empty."""

    def __init__(self, message: str = "Query is required"):
        super().__init__(message)


class SafetyRejection(QueryError):
    """The query text contains a destructive keyword and was not interpreted."""

    def __init__(self, disallowed_keywords: Sequence[str], matched: Sequence[str] = ()):
        self.disallowed_keywords = list(disallowed_keywords)
        self.matched = list(matched)
        super().__init__(
            "Harmful operations like DROP, DELETE, TRUNCATE are not allowed "
            "in this learning environment"
        )


class QueryExecutionError(QueryError):
    """Something unexpected went wrong while producing rows."""
