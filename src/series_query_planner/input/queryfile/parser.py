import json
from datetime import UTC, datetime, timedelta
from typing import Any

from series_query_planner.domain import HighLevelQuery, TagGroup
from series_query_planner.domain.models import EPOCH
from series_query_planner.logging_config import get_logger

logger = get_logger(__name__)


class HighLevelQueryParser:
    """Parser for JSON-lines high-level queries, as written by a bulk query generator.

    One query per line:

        {"id": 1, "human_label": "cpu avg", "measurement": "cpu",
         "field": "usage_user", "aggregation": "avg",
         "start": "2016-01-01T00:00:00Z", "end": "2016-01-01T01:00:00Z",
         "group_by_seconds": 60, "tag_sets": [["hostname=host_0"], ["hostname=host_1"]]}

    ``start``/``end`` are ISO 8601 strings or integer Unix nanoseconds; integer
    timestamps must be whole microseconds, the resolution of ``datetime``.
    ``tag_sets`` is a list of groups of ``key=value`` strings; groups are
    alternatives, the strings inside a group must all match.
    """

    REQUIRED_KEYS = ("measurement", "field", "aggregation", "start", "end")

    def parse_line(self, line: str) -> HighLevelQuery | None:
        """Parse one line. Returns None for blank, comment or malformed lines."""
        line = line.strip()
        if not line or line.startswith("#"):
            return None

        try:
            record = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.warning("Skipping line that is not valid JSON: %s", exc)
            return None

        if not isinstance(record, dict):
            logger.warning("Skipping JSON line that is not an object")
            return None

        try:
            return self.parse_record(record)
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            logger.warning("Skipping malformed query record: %s", exc)
            return None

    def parse_record(self, record: dict[str, Any]) -> HighLevelQuery:
        missing = [key for key in self.REQUIRED_KEYS if key not in record]
        if missing:
            raise KeyError(f"missing keys: {', '.join(missing)}")

        group_by = record.get("group_by_seconds")
        tag_sets = record.get("tag_sets") or []

        return HighLevelQuery(
            measurement=str(record["measurement"]),
            field_name=str(record["field"]),
            aggregation=str(record["aggregation"]),
            start=self._parse_time(record["start"]),
            end=self._parse_time(record["end"]),
            group_by=timedelta(seconds=float(group_by)) if group_by else None,
            tag_sets=tuple(TagGroup.parse(group) for group in tag_sets),
            human_label=str(record.get("human_label", "")),
            human_description=str(record.get("human_description", "")),
            id=int(record.get("id", 0)),
        )

    def _parse_time(self, value: Any) -> datetime:
        if isinstance(value, bool):
            raise TypeError(f"not a timestamp: {value!r}")

        if isinstance(value, int):
            micros, nanos = divmod(value, 1_000)
            if nanos:
                raise ValueError(f"timestamp {value} is finer than microsecond resolution")
            return EPOCH + timedelta(microseconds=micros)

        if isinstance(value, str):
            moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
            if moment.tzinfo is None:
                moment = moment.replace(tzinfo=UTC)
            return moment

        raise TypeError(f"not a timestamp: {value!r}")
