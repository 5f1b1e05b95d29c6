from series_query_planner.domain import LowLevelQuery

STATEMENT_TEMPLATE = (
    "SELECT {aggregation}(value) FROM {table} "
    "WHERE series_id = ? AND timestamp_ns >= ? AND timestamp_ns < ?"
)


def render_statement(aggregation: str, table: str) -> str:
    """Return the preparable statement text for an (aggregation, table) pair.

    The aggregation and table come from trusted configuration and are
    inlined; everything else is bound through placeholders.
    """
    return STATEMENT_TEMPLATE.format(aggregation=aggregation, table=table)


def build_low_level_query(
    aggregation: str,
    table: str,
    series_id: str,
    start_nanos: int,
    end_nanos: int,
) -> LowLevelQuery:
    return LowLevelQuery(
        statement=render_statement(aggregation, table),
        args=(series_id, start_nanos, end_nanos),
    )
