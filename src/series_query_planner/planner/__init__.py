from series_query_planner.planner.buckets import bucket_time_intervals
from series_query_planner.planner.builder import build_bucket_query, build_plan
from series_query_planner.planner.plan import QueryPlan
from series_query_planner.planner.statements import (
    STATEMENT_TEMPLATE,
    build_low_level_query,
    render_statement,
)

__all__ = [
    "bucket_time_intervals",
    "build_plan",
    "build_bucket_query",
    "QueryPlan",
    "STATEMENT_TEMPLATE",
    "build_low_level_query",
    "render_statement",
]
