from collections.abc import Iterable, Iterator
from pathlib import Path

from series_query_planner.domain import HighLevelQuery
from series_query_planner.input.queryfile.parser import HighLevelQueryParser


class QueryFileInput:
    """Input adapter that reads JSON-lines high-level queries from a file.

    The file is read whole on first iteration and closed before any line is
    parsed. Lines are then parsed one query at a time.
    """

    def __init__(
        self,
        file_path: str | Path,
        parser: HighLevelQueryParser | None = None,
    ) -> None:
        self._file_path = Path(file_path)
        self._parser = parser or HighLevelQueryParser()
        self._pending: Iterator[str] | None = None

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        parser: HighLevelQueryParser | None = None,
    ) -> "QueryFileInput":
        """Create adapter from pre-loaded lines (e.g. piped stdin or tests)."""
        instance = cls("<lines>", parser)
        instance._pending = iter(list(lines))
        return instance

    def __aiter__(self) -> "QueryFileInput":
        return self

    async def __anext__(self) -> HighLevelQuery:
        if self._pending is None:
            self._pending = iter(self._read_lines())

        for line in self._pending:
            query = self._parser.parse_line(line)
            if query is not None:
                return query

        raise StopAsyncIteration

    def _read_lines(self) -> list[str]:
        if not self._file_path.is_file():
            raise FileNotFoundError(f"Query file not found: {self._file_path}")
        with open(self._file_path, encoding="utf-8") as handle:
            return handle.readlines()
