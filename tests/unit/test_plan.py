from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

import pytest

from series_query_planner.domain import LowLevelQuery, PlanAssemblyError, PlanningError, TimeInterval
from series_query_planner.planner import QueryPlan, build_low_level_query

T0 = datetime(2024, 1, 1, tzinfo=UTC)


def at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


def q(series_id: str, table: str = "cpu", aggregation: str = "avg") -> LowLevelQuery:
    return build_low_level_query(aggregation, table, series_id, 0, 1)


class TestQueryPlan:
    def test_is_a_mapping(self) -> None:
        bucket = TimeInterval(at(0), at(60))
        plan = QueryPlan("avg", {bucket: [q("s1")]})

        assert isinstance(plan, Mapping)
        assert len(plan) == 1
        assert bucket in plan
        assert plan[bucket] == (q("s1"),)
        assert plan.queries_for(bucket) == (q("s1"),)
        assert plan.aggregation == "avg"

    def test_empty_buckets_are_kept(self) -> None:
        first = TimeInterval(at(0), at(60))
        second = TimeInterval(at(60), at(120))
        plan = QueryPlan("avg", {second: [], first: [q("s1")]})

        assert set(plan) == {first, second}
        assert plan[second] == ()
        assert plan.buckets() == (first, second)
        assert plan.query_count == 1

    def test_statements_are_distinct(self) -> None:
        plan = QueryPlan(
            "avg",
            {
                TimeInterval(at(0), at(60)): [q("s1"), q("s2"), q("s3", table="mem")],
                TimeInterval(at(60), at(120)): [q("s1")],
            },
        )
        assert len(plan.statements()) == 2
        assert plan.query_count == 4

    def test_no_buckets_is_an_error(self) -> None:
        with pytest.raises(PlanAssemblyError):
            QueryPlan("avg", {})

    def test_overlapping_buckets_are_an_error(self) -> None:
        with pytest.raises(PlanAssemblyError):
            QueryPlan(
                "avg",
                {TimeInterval(at(0), at(60)): [], TimeInterval(at(30), at(90)): []},
            )

    def test_malformed_interval_is_an_error(self) -> None:
        with pytest.raises(PlanningError):
            QueryPlan("avg", {TimeInterval(at(60), at(0)): []})

    def test_repr(self) -> None:
        plan = QueryPlan("avg", {TimeInterval(at(0), at(60)): [q("s1")]})
        assert repr(plan) == "QueryPlan(aggregation='avg', buckets=1, queries=1)"
