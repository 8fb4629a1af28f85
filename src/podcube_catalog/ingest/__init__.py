"""Ingestion: raw records and JSON Feed items -> typed Episodes.

The adapter parses raw date strings into CalendarValues so the catalog
index only ever sees typed episodes.
"""

from .json_feed import (
    FeedMetadata,
    feed_item_to_record,
    normalize_feed_item,
    parse_content_html,
    parse_feed_document,
    split_title,
    strip_html,
)
from .records import (
    IngestConfig,
    episode_from_record,
    ingest_records,
    parse_episode_date,
    parse_leading_float,
    parse_published,
)

__all__ = [
    "IngestConfig",
    "episode_from_record",
    "ingest_records",
    "parse_episode_date",
    "parse_leading_float",
    "parse_published",
    "FeedMetadata",
    "feed_item_to_record",
    "normalize_feed_item",
    "parse_content_html",
    "parse_feed_document",
    "split_title",
    "strip_html",
]
