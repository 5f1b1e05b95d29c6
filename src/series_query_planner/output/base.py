from typing import Protocol, runtime_checkable

from series_query_planner.domain import HighLevelQuery
from series_query_planner.planner import QueryPlan


@runtime_checkable
class PlanOutput(Protocol):
    """Protocol for destinations that receive finished query plans."""

    @property
    def name(self) -> str:
        ...

    async def send(self, query: HighLevelQuery, plan: QueryPlan) -> None:
        ...
