from series_query_planner.input.queryfile.adapter import QueryFileInput
from series_query_planner.input.queryfile.parser import HighLevelQueryParser

__all__ = ["QueryFileInput", "HighLevelQueryParser"]
