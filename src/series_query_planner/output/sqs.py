import json
from datetime import datetime, timedelta
from typing import Any

from aiobotocore.session import get_session

from series_query_planner.domain import HighLevelQuery
from series_query_planner.logging_config import get_logger
from series_query_planner.planner import QueryPlan

logger = get_logger(__name__)


class SqsPlanOutput:
    """Hands serialized plans to execution workers through an SQS queue."""

    def __init__(self, queue_url: str, region: str = "us-east-1") -> None:
        self._queue_url = queue_url
        self._region = region
        self._session = get_session()

    @property
    def name(self) -> str:
        return "sqs"

    async def send(self, query: HighLevelQuery, plan: QueryPlan) -> None:
        async with self._session.create_client("sqs", region_name=self._region) as client:
            await client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=self._serialize_plan(query, plan),
            )
        logger.debug("Sent plan for query %s to %s", query.id, self._queue_url)

    def _serialize_plan(self, query: HighLevelQuery, plan: QueryPlan) -> str:
        body = {
            "query": {
                "id": query.id,
                "human_label": query.human_label,
                "human_description": query.human_description,
                "measurement": query.measurement,
                "field": query.field_name,
                "aggregation": query.aggregation,
                "start": query.start,
                "end": query.end,
                "group_by": query.bucket_width,
                "tag_sets": [sorted(str(p) for p in group.predicates) for group in query.tag_sets],
            },
            "aggregation": plan.aggregation,
            "buckets": [
                {
                    "start": bucket.start,
                    "end": bucket.end,
                    "queries": [
                        {"statement": low_level.statement, "args": list(low_level.args)}
                        for low_level in plan[bucket]
                    ],
                }
                for bucket in plan.buckets()
            ],
        }
        return json.dumps(body, default=self._json_default)

    @staticmethod
    def _json_default(obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, timedelta):
            return obj.total_seconds()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
