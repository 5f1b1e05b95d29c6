from datetime import UTC, datetime, timedelta

import pytest

from series_query_planner.domain import HighLevelQuery
from series_query_planner.input import QueryInput

T0 = datetime(2024, 1, 1, tzinfo=UTC)


class MockQueryInput:
    """Mock implementation of QueryInput for testing."""

    def __init__(self, queries: list[HighLevelQuery]) -> None:
        self._queries = queries
        self._index = 0

    def __aiter__(self) -> "MockQueryInput":
        return self

    async def __anext__(self) -> HighLevelQuery:
        if self._index >= len(self._queries):
            raise StopAsyncIteration
        query = self._queries[self._index]
        self._index += 1
        return query


class TestQueryInputProtocol:
    def test_protocol_is_runtime_checkable(self) -> None:
        mock = MockQueryInput([])
        assert isinstance(mock, QueryInput)

    def test_non_conforming_class_fails_isinstance(self) -> None:
        class NotAnInput:
            pass

        assert not isinstance(NotAnInput(), QueryInput)

    @pytest.mark.asyncio
    async def test_mock_yields_query_objects(self) -> None:
        queries = [
            HighLevelQuery("cpu", "usage_user", "avg", T0, T0 + timedelta(hours=1)),
            HighLevelQuery("mem", "used", "max", T0, T0 + timedelta(hours=1)),
        ]
        mock = MockQueryInput(queries)

        collected = [query async for query in mock]

        assert collected == queries
