from series_query_planner.core.pipeline import PlanningPipeline

__all__ = ["PlanningPipeline"]
