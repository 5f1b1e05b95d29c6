from collections import deque
from collections.abc import Iterable

from series_query_planner.domain import HighLevelQuery


class ManualInput:
    """Queue of high-level queries fed in by the caller.

    Queries submitted while a pipeline is draining the queue are planned in
    the same run. Each query is yielded once.
    """

    def __init__(self, queries: Iterable[HighLevelQuery] = ()) -> None:
        self._queue: deque[HighLevelQuery] = deque(queries)

    def submit(self, *queries: HighLevelQuery) -> None:
        self._queue.extend(queries)

    def __len__(self) -> int:
        return len(self._queue)

    def __aiter__(self) -> "ManualInput":
        return self

    async def __anext__(self) -> HighLevelQuery:
        if not self._queue:
            raise StopAsyncIteration
        return self._queue.popleft()
