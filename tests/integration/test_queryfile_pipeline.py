import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from series_query_planner import (
    ConsolePlanOutput,
    HighLevelQuery,
    PlanningPipeline,
    QueryFileInput,
    QueryPlan,
    Series,
    SeriesCatalog,
    TimeInterval,
)
from series_query_planner.domain import to_unix_nanos

T0 = datetime(2016, 1, 1, tzinfo=UTC)


class MockPlanOutput:
    name: str = "mock"

    def __init__(self) -> None:
        self.plans: list[tuple[HighLevelQuery, QueryPlan]] = []

    async def send(self, query: HighLevelQuery, plan: QueryPlan) -> None:
        self.plans.append((query, plan))


def make_catalog() -> SeriesCatalog:
    return SeriesCatalog(
        Series(
            table="measurements",
            series_id=f"cpu,hostname=host_{i}#usage_user",
            measurement="cpu",
            field_name="usage_user",
            tags={"hostname": f"host_{i}"},
            valid=TimeInterval(T0, T0 + timedelta(days=1)),
        )
        for i in range(4)
    )


@pytest.mark.asyncio
async def test_query_file_to_plans(tmp_path: Path) -> None:
    lines = [
        {
            "id": 1,
            "human_label": "cpu max, rand 2 hosts, 10m by 1m",
            "measurement": "cpu",
            "field": "usage_user",
            "aggregation": "max",
            "start": "2016-01-01T00:00:00Z",
            "end": "2016-01-01T00:10:00Z",
            "group_by_seconds": 60,
            "tag_sets": [["hostname=host_1"], ["hostname=host_3"]],
        },
        {
            "id": 2,
            "measurement": "cpu",
            "field": "usage_user",
            "aggregation": "avg",
            "start": "2016-01-01T00:00:30Z",
            "end": "2016-01-01T00:02:00Z",
            "group_by_seconds": 60,
        },
    ]
    query_file = tmp_path / "queries.jsonl"
    query_file.write_text("\n".join(json.dumps(line) for line in lines) + "\n")
    output = MockPlanOutput()

    pipeline = PlanningPipeline(QueryFileInput(query_file), make_catalog(), [output])
    assert await pipeline.run() == 2

    _, two_hosts = output.plans[0]
    assert len(two_hosts) == 10
    assert two_hosts.query_count == 20
    for bucket in two_hosts:
        assert {q.args[0] for q in two_hosts[bucket]} == {
            "cpu,hostname=host_1#usage_user",
            "cpu,hostname=host_3#usage_user",
        }

    _, offset = output.plans[1]
    assert offset.buckets() == (
        TimeInterval(T0 + timedelta(seconds=30), T0 + timedelta(seconds=90)),
        TimeInterval(T0 + timedelta(seconds=90), T0 + timedelta(seconds=150)),
    )
    last = offset.buckets()[-1]
    assert {q.args[2] for q in offset[last]} == {to_unix_nanos(T0 + timedelta(minutes=2))}


@pytest.mark.asyncio
async def test_query_file_to_console(capsys) -> None:
    line = json.dumps(
        {
            "id": 5,
            "human_label": "cpu avg",
            "measurement": "cpu",
            "field": "usage_user",
            "aggregation": "avg",
            "start": "2016-01-01T00:00:00Z",
            "end": "2016-01-01T00:01:00Z",
        }
    )
    pipeline = PlanningPipeline(QueryFileInput.from_lines([line]), make_catalog(), [ConsolePlanOutput()])
    await pipeline.run()

    captured = capsys.readouterr()
    assert "[PLAN] [5] cpu avg - 1 bucket(s), 4 query(ies)" in captured.out
