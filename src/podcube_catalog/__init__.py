"""
podcube-catalog: calendar values and a catalog index for episodes dated
anywhere from ordinary CE years to deep BCE time.
"""

from podcube_catalog.catalog import CatalogConfig, CatalogIndex, EpisodeGroup
from podcube_catalog.core.calendar import CalendarValue, humanize_interval
from podcube_catalog.core.domain import Episode, FilterCriteria, SortKey
from podcube_catalog.ingest import IngestConfig, episode_from_record, parse_feed_document

__version__ = "0.1.0"

__all__ = [
    "CalendarValue",
    "humanize_interval",
    "Episode",
    "FilterCriteria",
    "SortKey",
    "CatalogConfig",
    "CatalogIndex",
    "EpisodeGroup",
    "IngestConfig",
    "episode_from_record",
    "parse_feed_document",
]
