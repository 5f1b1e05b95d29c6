from series_query_planner.input.base import QueryInput
from series_query_planner.input.manual import ManualInput
from series_query_planner.input.queryfile import HighLevelQueryParser, QueryFileInput

__all__ = [
    "QueryInput",
    "ManualInput",
    "QueryFileInput",
    "HighLevelQueryParser",
]
