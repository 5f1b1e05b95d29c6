"""Domain models for time-series query planning."""

from series_query_planner.domain.exceptions import (
    InvalidTimeRangeError,
    PlanAssemblyError,
    PlanningError,
)
from series_query_planner.domain.models import (
    HighLevelQuery,
    LowLevelQuery,
    QueryResult,
    Series,
    TagGroup,
    TagPredicate,
    TimeInterval,
    assume_utc,
    to_unix_nanos,
)

__all__ = [
    "HighLevelQuery",
    "LowLevelQuery",
    "QueryResult",
    "Series",
    "TagGroup",
    "TagPredicate",
    "TimeInterval",
    "assume_utc",
    "to_unix_nanos",
    "PlanningError",
    "InvalidTimeRangeError",
    "PlanAssemblyError",
]
