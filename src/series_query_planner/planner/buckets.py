"""
GROUP BY time bucketing.

Buckets are anchored at the query start and are ``width`` long:

    start=00:00, end=01:40, width=30m

    [00:00, 00:30)
    [00:30, 01:00)
    [01:00, 01:30)
    [01:30, 02:00)   <- kept whole; clamped to 01:40 only when bound

A zero width yields the single interval [start, end], as does start == end.
Naive datetimes are taken to be UTC.
"""

from datetime import datetime, timedelta

from series_query_planner.domain import InvalidTimeRangeError, TimeInterval, assume_utc


def bucket_time_intervals(
    start: datetime,
    end: datetime,
    width: timedelta | None,
) -> list[TimeInterval]:
    """Split [start, end] into ordered, contiguous buckets of ``width``.

    Raises:
        InvalidTimeRangeError: If end precedes start, width is negative, or
            bucket arithmetic overflows the datetime range.
    """
    start = assume_utc(start)
    end = assume_utc(end)
    if end < start:
        raise InvalidTimeRangeError("end time precedes start time", start=start, end=end)

    width = width or timedelta(0)
    if width < timedelta(0):
        raise InvalidTimeRangeError(f"negative group-by width: {width}", start=start, end=end)

    if width == timedelta(0) or start == end:
        return [TimeInterval(start=start, end=end)]

    intervals: list[TimeInterval] = []
    bucket_start = start
    try:
        while bucket_start < end:
            bucket_end = bucket_start + width
            intervals.append(TimeInterval(start=bucket_start, end=bucket_end))
            bucket_start = bucket_end
    except OverflowError as exc:
        raise InvalidTimeRangeError(
            f"group-by bucket overflows datetime range after {bucket_start.isoformat()}",
            start=start,
            end=end,
        ) from exc

    return intervals
