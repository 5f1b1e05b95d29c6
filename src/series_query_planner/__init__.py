__version__ = "0.1.0"

import logging

from series_query_planner.catalog import SeriesCatalog, SeriesSource
from series_query_planner.config import PlannerConfig
from series_query_planner.core import PlanningPipeline
from series_query_planner.domain import (
    HighLevelQuery,
    InvalidTimeRangeError,
    LowLevelQuery,
    PlanAssemblyError,
    PlanningError,
    QueryResult,
    Series,
    TagGroup,
    TagPredicate,
    TimeInterval,
)
from series_query_planner.input import ManualInput, QueryFileInput, QueryInput
from series_query_planner.logging_config import get_logger, setup_logging
from series_query_planner.output import ConsolePlanOutput, PlanOutput, SqsPlanOutput
from series_query_planner.planner import QueryPlan, bucket_time_intervals, build_plan

logging.getLogger("series_query_planner").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "build_plan",
    "bucket_time_intervals",
    "QueryPlan",
    "HighLevelQuery",
    "LowLevelQuery",
    "QueryResult",
    "Series",
    "TagGroup",
    "TagPredicate",
    "TimeInterval",
    "PlanningError",
    "InvalidTimeRangeError",
    "PlanAssemblyError",
    "SeriesCatalog",
    "SeriesSource",
    "PlanningPipeline",
    "QueryInput",
    "ManualInput",
    "QueryFileInput",
    "PlanOutput",
    "ConsolePlanOutput",
    "SqsPlanOutput",
    "PlannerConfig",
    "setup_logging",
    "get_logger",
]
