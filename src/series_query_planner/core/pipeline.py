from collections.abc import Sequence

from series_query_planner.catalog import SeriesSource
from series_query_planner.domain import PlanningError
from series_query_planner.input import QueryInput
from series_query_planner.logging_config import get_logger
from series_query_planner.output import PlanOutput
from series_query_planner.planner import build_plan

logger = get_logger(__name__)


class PlanningPipeline:
    def __init__(
        self,
        input_source: QueryInput,
        catalog: SeriesSource,
        outputs: Sequence[PlanOutput],
    ) -> None:
        self._input = input_source
        self._catalog = catalog
        self._outputs = tuple(outputs)

    async def run(self) -> int:
        """Plan every query from the input and hand each plan to all outputs.

        Returns the number of plans produced.
        """
        planned = 0
        async for query in self._input:
            snapshot = self._catalog.snapshot()
            try:
                plan = build_plan(query, snapshot)
            except PlanningError:
                logger.exception("Failed to plan query %s (%s)", query.id, query.human_label)
                raise

            logger.info(
                "Planned query %s: %d bucket(s), %d low-level queries",
                query.id,
                len(plan),
                plan.query_count,
            )
            for output in self._outputs:
                await output.send(query, plan)
            planned += 1
        return planned
