from series_query_planner.domain import HighLevelQuery
from series_query_planner.planner import QueryPlan


class ConsolePlanOutput:
    """Console output adapter that prints a plan for debugging."""

    def __init__(self, prefix: str = "[PLAN]", show_queries: bool = True) -> None:
        self._prefix = prefix
        self._show_queries = show_queries

    @property
    def name(self) -> str:
        return "console"

    async def send(self, query: HighLevelQuery, plan: QueryPlan) -> None:
        label = query.human_label or f"{query.aggregation}({query.measurement}.{query.field_name})"
        print(f"{self._prefix} [{query.id}] {label} - {len(plan)} bucket(s), {plan.query_count} query(ies)")

        for bucket in plan.buckets():
            queries = plan[bucket]
            print(f"  {bucket}: {len(queries)} query(ies)")
            if not self._show_queries:
                continue
            for low_level in queries:
                print(f"    {low_level.statement} {list(low_level.args)}")
