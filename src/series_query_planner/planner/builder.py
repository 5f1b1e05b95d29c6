"""Turn a high-level query plus a catalog snapshot into a query plan.

Matching runs in two phases. Name and tag tests do not depend on the
bucket, so each series is checked against them once (cheapest first:
measurement, field, tags). Only survivors are tested against every bucket
for time overlap, and a series lands in each bucket it overlaps.

Bound time arguments are the bucket clamped to the query's own range. This
reproduces InfluxDB's rounded GROUP BY time boundaries:
https://docs.influxdata.com/influxdb/v0.13/query_language/data_exploration/#rounded-group-by-time-boundaries
The bucket itself, unclamped, stays the plan key.
"""

from collections.abc import Iterable

from series_query_planner.domain import HighLevelQuery, LowLevelQuery, Series, TimeInterval
from series_query_planner.logging_config import get_logger
from series_query_planner.planner.buckets import bucket_time_intervals
from series_query_planner.planner.plan import QueryPlan
from series_query_planner.planner.statements import build_low_level_query

logger = get_logger(__name__)


def build_plan(query: HighLevelQuery, snapshot: Iterable[Series]) -> QueryPlan:
    """Plan ``query`` against a snapshot of the series catalog.

    Raises:
        InvalidTimeRangeError: If the query's time range cannot be bucketed.
        PlanAssemblyError: If the resulting bucket set is inconsistent.
    """
    intervals = bucket_time_intervals(query.start, query.end, query.group_by)

    # Every bucket gets a key up front so empty buckets survive as "no data".
    bucketed: dict[TimeInterval, list[Series]] = {interval: [] for interval in intervals}

    candidates = 0
    for series in snapshot:
        if not series.matches_measurement_name(query.measurement):
            continue
        if not series.matches_field_name(query.field_name):
            continue
        if not series.matches_tag_sets(query.tag_sets):
            continue

        candidates += 1
        for interval in intervals:
            if series.matches_time_interval(interval):
                bucketed[interval].append(series)

    plan_buckets = {
        interval: [build_bucket_query(query, interval, series) for series in members]
        for interval, members in bucketed.items()
    }
    plan = QueryPlan(query.aggregation, plan_buckets)

    logger.debug(
        "Planned query %s: %d matching series, %d bucket(s), %d low-level queries",
        query.id,
        candidates,
        len(plan),
        plan.query_count,
    )
    return plan


def build_bucket_query(query: HighLevelQuery, interval: TimeInterval, series: Series) -> LowLevelQuery:
    """Build the low-level query for one series in one bucket, clamped to the query range."""
    bounds = interval.clamp(query.time_range)
    return build_low_level_query(
        query.aggregation,
        series.table,
        series.series_id,
        bounds.start_nanos,
        bounds.end_nanos,
    )
