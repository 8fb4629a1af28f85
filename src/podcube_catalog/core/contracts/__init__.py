"""
Contract Validation Module

JSON Schema contracts for raw ingestion input.
"""

from .validators import (
    ContractValidator,
    EpisodeRecordValidator,
    FeedDocumentValidator,
    FeedItemValidator,
    SchemaLoader,
    validate_episode_record,
    validate_feed_document,
    validate_feed_item,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EpisodeRecordValidator",
    "FeedItemValidator",
    "FeedDocumentValidator",
    # Functions
    "validate_episode_record",
    "validate_feed_item",
    "validate_feed_document",
]
