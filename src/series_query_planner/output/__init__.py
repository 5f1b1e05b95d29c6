from series_query_planner.output.base import PlanOutput
from series_query_planner.output.console import ConsolePlanOutput
from series_query_planner.output.sqs import SqsPlanOutput

__all__ = ["PlanOutput", "ConsolePlanOutput", "SqsPlanOutput"]
