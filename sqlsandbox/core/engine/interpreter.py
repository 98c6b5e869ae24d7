import logging
import re
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from sqlsandbox.core.database import TABLE_NAMES, Dataset
from sqlsandbox.core.models import Row


# -----------------------------------------------------------------------------
# INTERPRETER MODULE - Query shapes
# Purpose: Map free query text onto one of a handful of known lookups
# Rules are tried top to bottom and the first one that produces rows wins.
# A rule whose handler returns None lets the next rule try.
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)

# Searched in the original text, first occurrence only
AGE_PATTERN = re.compile(r"age\s*>\s*(\d+)", re.IGNORECASE | re.ASCII)
LIMIT_PATTERN = re.compile(r"limit\s+(\d+)", re.IGNORECASE | re.ASCII)
MAX_NUMBER_DIGITS = 18

Handler = Callable[[Dataset, str, str], Optional[Sequence[Row]]]


@dataclass(frozen=True)
class QueryRule:
    """
    One recognized query shape.

    Args:
        name: Label used in logs and returned with the rows.
        matches: Predicate over the lower-cased, trimmed query.
        handler: Called with (dataset, original query, normalized query).
            Returns the rows, or None to fall through to the next rule.
    """

    name: str
    matches: Callable[[str], bool]
    handler: Handler


@dataclass(frozen=True)
class Interpretation:
    rule: str
    rows: List[Row]


def normalize(query: str) -> str:
    return query.strip().lower()


def _first_int(pattern: re.Pattern, query: str) -> Optional[int]:
    match = pattern.search(query)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    # Longer numbers exceed every table size and age anyway
    if len(digits) > MAX_NUMBER_DIGITS:
        return sys.maxsize
    return int(digits)


# =========================
# Rules
# =========================
def _select_all_rule(table: str) -> QueryRule:
    prefix = f"select * from {table}"

    def handler(dataset: Dataset, query: str, normalized: str):
        return list(dataset.table(table))

    return QueryRule(
        name=f"select_all_{table}",
        matches=lambda normalized: normalized.startswith(prefix),
        handler=handler,
    )


def _users_older_than(dataset: Dataset, query: str, normalized: str):
    min_age = _first_int(AGE_PATTERN, query)
    if min_age is None:
        return None
    return [user for user in dataset.users if user.age > min_age]


def _limited_rows(dataset: Dataset, query: str, normalized: str):
    limit = _first_int(LIMIT_PATTERN, query)
    if limit is None:
        return None
    if "products" in normalized:
        return list(dataset.products[:limit])
    if "users" in normalized:
        return list(dataset.users[:limit])
    return None


def build_rules(default_limit: int = 10) -> List[QueryRule]:
    """Return the query shapes in priority order."""

    def default_users(dataset: Dataset, query: str, normalized: str):
        return list(dataset.users[:default_limit])

    rules = [_select_all_rule(table) for table in TABLE_NAMES]
    rules.append(
        QueryRule(
            name="users_where_age",
            matches=lambda normalized: (
                "where" in normalized
                and "users" in normalized
                and "age >" in normalized
            ),
            handler=_users_older_than,
        )
    )
    rules.append(
        QueryRule(
            name="limit",
            matches=lambda normalized: "limit" in normalized,
            handler=_limited_rows,
        )
    )
    rules.append(
        QueryRule(
            name="default_users",
            matches=lambda normalized: True,
            handler=default_users,
        )
    )
    return rules


class QueryInterpreter:
    """Runs query text against a read-only dataset using an ordered rule list."""

    def __init__(
        self,
        dataset: Dataset,
        default_limit: int = 10,
        rules: Optional[Sequence[QueryRule]] = None,
    ):
        self.dataset = dataset
        self.rules = list(rules) if rules is not None else build_rules(default_limit)

    def interpret(self, query: str) -> Interpretation:
        normalized = normalize(query)

        for rule in self.rules:
            if not rule.matches(normalized):
                continue
            rows = rule.handler(self.dataset, query, normalized)
            if rows is None:
                logger.debug(f"Rule {rule.name} matched but fell through")
                continue
            logger.debug(f"Rule {rule.name} produced {len(rows)} rows")
            return Interpretation(rule=rule.name, rows=list(rows))

        # Only reachable with a custom rule list lacking a catch-all
        return Interpretation(rule="none", rows=[])

    def execute(self, query: str) -> List[Row]:
        return self.interpret(query).rows
