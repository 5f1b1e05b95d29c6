from typing import Protocol, Self, runtime_checkable

from series_query_planner.domain import HighLevelQuery


@runtime_checkable
class QueryInput(Protocol):
    """Async source of high-level queries for a planning pipeline.

    Iteration ends when the source has nothing more to plan.
    """

    def __aiter__(self) -> Self:
        ...

    async def __anext__(self) -> HighLevelQuery:
        ...
