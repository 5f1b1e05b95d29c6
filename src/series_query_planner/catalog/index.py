import threading
from collections.abc import Iterable, Iterator

from series_query_planner.domain import Series
from series_query_planner.logging_config import get_logger

logger = get_logger(__name__)


class SeriesCatalog:
    """Append-only, in-memory index of known series.

    Populated once up front, then consulted by planning through
    ``snapshot()``, which returns an immutable copy so planners never
    observe a catalog that is still being filled.
    """

    def __init__(self, series: Iterable[Series] = ()) -> None:
        self._lock = threading.Lock()
        self._series: list[Series] = list(series)

    def add(self, series: Series) -> None:
        with self._lock:
            self._series.append(series)

    def extend(self, series: Iterable[Series]) -> None:
        batch = list(series)
        with self._lock:
            self._series.extend(batch)
        logger.debug("Registered %d series (catalog size %d)", len(batch), len(self))

    def snapshot(self) -> tuple[Series, ...]:
        with self._lock:
            return tuple(self._series)

    def __len__(self) -> int:
        with self._lock:
            return len(self._series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.snapshot())
