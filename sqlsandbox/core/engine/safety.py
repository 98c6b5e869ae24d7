import re
from typing import List

from sqlsandbox.core.exceptions import SafetyRejection


# -----------------------------------------------------------------------------
# SAFETY MODULE - Keyword guard
# Purpose: Refuse destructive-looking query text before anything interprets it
# -----------------------------------------------------------------------------

DISALLOWED_KEYWORDS = (
    "drop",
    "delete",
    "truncate",
    "alter table",
    "pragma writable_schema",
)


def _keyword_pattern(keyword: str) -> str:
    # "alter table" also matches "ALTER   TABLE" or "alter\ntable"
    return r"\s+".join(re.escape(word) for word in keyword.split())


_HARMFUL_PATTERN = re.compile(
    r"\b(" + "|".join(_keyword_pattern(k) for k in DISALLOWED_KEYWORDS) + r")\b",
    re.IGNORECASE | re.ASCII,
)


def is_harmful_query(query: str) -> bool:
    """Whole-word, case-insensitive test for any disallowed keyword."""
    return _HARMFUL_PATTERN.search(query) is not None


def find_harmful_keywords(query: str) -> List[str]:
    """Return the disallowed keywords present in the query, in declaration order."""
    found = {
        " ".join(match.group(1).lower().split())
        for match in _HARMFUL_PATTERN.finditer(query)
    }
    return [keyword for keyword in DISALLOWED_KEYWORDS if keyword in found]


def check_query(query: str) -> None:
    """Raise SafetyRejection when the query contains a disallowed keyword."""
    matched = find_harmful_keywords(query)
    if matched:
        raise SafetyRejection(DISALLOWED_KEYWORDS, matched)
