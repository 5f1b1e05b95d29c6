"""Core domain models for planning time-series aggregation queries."""

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def assume_utc(moment: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def to_unix_nanos(moment: datetime) -> int:
    """Return the exact Unix timestamp of ``moment`` in nanoseconds.

    Naive datetimes are taken to be UTC.
    """
    delta = assume_utc(moment) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + delta.microseconds * 1_000


@dataclass(frozen=True, slots=True, order=True)
class TimeInterval:
    """A time range [start, end). A zero-length interval stands for the instant ``start``.

    Naive bounds are stored as UTC so intervals from mixed sources compare.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", assume_utc(self.start))
        object.__setattr__(self, "end", assume_utc(self.end))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: "TimeInterval") -> bool:
        """Return True if the two intervals share at least one instant."""
        if self.is_empty and other.is_empty:
            return self.start == other.start
        if self.is_empty:
            return other.start <= self.start < other.end
        if other.is_empty:
            return self.start <= other.start < self.end
        return self.start < other.end and other.start < self.end

    def clamp(self, bounds: "TimeInterval") -> "TimeInterval":
        """Return this interval with its start raised and its end lowered to ``bounds``."""
        start = max(self.start, bounds.start)
        end = min(self.end, bounds.end)
        return TimeInterval(start=start, end=end)

    @property
    def start_nanos(self) -> int:
        return to_unix_nanos(self.start)

    @property
    def end_nanos(self) -> int:
        return to_unix_nanos(self.end)

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"


@dataclass(frozen=True, slots=True)
class TagPredicate:
    """A single ``key=value`` equality test against a series' tags."""

    key: str
    value: str

    @classmethod
    def parse(cls, text: str) -> "TagPredicate":
        key, sep, value = text.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Tag predicate must look like 'key=value': {text!r}")
        return cls(key=key, value=value.strip())

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass(frozen=True, slots=True)
class TagGroup:
    """Tag predicates that must all hold at once."""

    predicates: frozenset[TagPredicate] = field(default_factory=frozenset)

    @classmethod
    def from_mapping(cls, tags: Mapping[str, str]) -> "TagGroup":
        return cls(frozenset(TagPredicate(key, value) for key, value in tags.items()))

    @classmethod
    def parse(cls, items: Iterable[str]) -> "TagGroup":
        return cls(frozenset(TagPredicate.parse(item) for item in items))

    def is_satisfied_by(self, tags: frozenset[TagPredicate]) -> bool:
        return self.predicates <= tags

    def __str__(self) -> str:
        return "{" + ",".join(sorted(str(p) for p in self.predicates)) + "}"


@dataclass(frozen=True, slots=True)
class HighLevelQuery:
    """A user-facing aggregation query over one measurement field.

    ``tag_sets`` is a disjunction of conjunctions: a series is selected when
    every predicate of at least one group holds for it. No groups selects
    every series.
    """

    measurement: str
    field_name: str
    aggregation: str
    start: datetime
    end: datetime
    group_by: timedelta | None = None
    tag_sets: tuple[TagGroup, ...] = ()
    human_label: str = ""
    human_description: str = ""
    id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", assume_utc(self.start))
        object.__setattr__(self, "end", assume_utc(self.end))
        if not isinstance(self.tag_sets, tuple):
            object.__setattr__(self, "tag_sets", tuple(self.tag_sets))

    @property
    def time_range(self) -> TimeInterval:
        return TimeInterval(start=self.start, end=self.end)

    @property
    def bucket_width(self) -> timedelta:
        return self.group_by or timedelta(0)

    def force_utc(self) -> "HighLevelQuery":
        """Return a copy with start and end expressed in UTC."""
        return dataclasses.replace(self, start=_as_utc(self.start), end=_as_utc(self.end))

    def __str__(self) -> str:
        tag_sets = "[" + " ".join(str(group) for group in self.tag_sets) + "]"
        return (
            f"ID: {self.id}, HumanLabel: {self.human_label}, "
            f"HumanDescription: {self.human_description}, "
            f"MeasurementName: {self.measurement}, FieldName: {self.field_name}, "
            f"AggregationType: {self.aggregation}, TimeStart: {self.start.isoformat()}, "
            f"TimeEnd: {self.end.isoformat()}, GroupByDuration: {self.bucket_width}, "
            f"TagSets: {tag_sets}"
        )


def _as_utc(moment: datetime) -> datetime:
    return assume_utc(moment).astimezone(UTC)


@dataclass(frozen=True, slots=True)
class Series:
    """A physical series registered in the catalog.

    ``tags`` may be passed as a plain mapping; it is stored as a frozenset
    of predicates.
    """

    table: str
    series_id: str
    measurement: str
    field_name: str
    valid: TimeInterval
    tags: frozenset[TagPredicate] = frozenset()

    def __post_init__(self) -> None:
        if isinstance(self.tags, Mapping):
            tags = frozenset(TagPredicate(key, value) for key, value in self.tags.items())
            object.__setattr__(self, "tags", tags)
        elif not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def matches_measurement_name(self, name: str) -> bool:
        return self.measurement == name

    def matches_field_name(self, name: str) -> bool:
        return self.field_name == name

    def matches_tag_sets(self, tag_sets: Iterable[TagGroup]) -> bool:
        groups = tuple(tag_sets)
        if not groups:
            return True
        return any(group.is_satisfied_by(self.tags) for group in groups)

    def matches_time_interval(self, interval: TimeInterval) -> bool:
        return self.valid.overlaps(interval)


@dataclass(frozen=True, slots=True)
class LowLevelQuery:
    """A prepared statement and the arguments bound to its placeholders."""

    statement: str
    args: tuple[str, int, int]


@dataclass(frozen=True, slots=True)
class QueryResult:
    """An aggregate value computed for one bucket."""

    interval: TimeInterval
    value: float

    def __str__(self) -> str:
        return f"{self.interval}: {self.value}"
