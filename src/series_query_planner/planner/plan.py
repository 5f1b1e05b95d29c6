from collections.abc import Iterator, Mapping, Sequence

from series_query_planner.domain import LowLevelQuery, PlanAssemblyError, TimeInterval


class QueryPlan(Mapping[TimeInterval, tuple[LowLevelQuery, ...]]):
    """Maps every GROUP BY bucket of a query to the low-level queries answering it.

    Buckets with no matching series are present with an empty tuple, which
    downstream aggregation reads as "no data" for that bucket.
    """

    def __init__(
        self,
        aggregation: str,
        buckets: Mapping[TimeInterval, Sequence[LowLevelQuery]],
    ) -> None:
        if not buckets:
            raise PlanAssemblyError("Query plan needs at least one time bucket")

        ordered = sorted(buckets)
        for interval in ordered:
            if interval.end < interval.start:
                raise PlanAssemblyError(f"Malformed bucket interval: {interval}")
        for previous, current in zip(ordered, ordered[1:]):
            if current.start < previous.end:
                raise PlanAssemblyError(f"Overlapping buckets: {previous} and {current}")

        self.aggregation = aggregation
        self._buckets: dict[TimeInterval, tuple[LowLevelQuery, ...]] = {
            interval: tuple(buckets[interval]) for interval in ordered
        }

    def __getitem__(self, bucket: TimeInterval) -> tuple[LowLevelQuery, ...]:
        return self._buckets[bucket]

    def __iter__(self) -> Iterator[TimeInterval]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def buckets(self) -> tuple[TimeInterval, ...]:
        return tuple(self._buckets)

    def queries_for(self, bucket: TimeInterval) -> tuple[LowLevelQuery, ...]:
        return self._buckets[bucket]

    @property
    def query_count(self) -> int:
        return sum(len(queries) for queries in self._buckets.values())

    def statements(self) -> frozenset[str]:
        """Distinct statement texts in the plan, for preparing each once."""
        return frozenset(q.statement for queries in self._buckets.values() for q in queries)

    def __repr__(self) -> str:
        return (
            f"QueryPlan(aggregation={self.aggregation!r}, buckets={len(self)}, "
            f"queries={self.query_count})"
        )
