from typing import Protocol, runtime_checkable

from series_query_planner.domain import Series


@runtime_checkable
class SeriesSource(Protocol):
    """Protocol for anything that can hand out a point-in-time copy of known series."""

    def snapshot(self) -> tuple[Series, ...]:
        ...
