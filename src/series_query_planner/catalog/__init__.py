from series_query_planner.catalog.base import SeriesSource
from series_query_planner.catalog.index import SeriesCatalog

__all__ = ["SeriesSource", "SeriesCatalog"]
