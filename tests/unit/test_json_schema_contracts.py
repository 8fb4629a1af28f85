"""
Tests for JSON Schema Contract Validators

Comprehensive checks of the ingestion contracts:
- The schemas themselves are valid Draft 2020-12
- Valid data passes
- Required fields are enforced
- Type and minimum constraints are enforced
- Loader caching and error paths
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from podcube_catalog.core.contracts import (
    EpisodeRecordValidator,
    FeedDocumentValidator,
    FeedItemValidator,
    SchemaLoader,
    validate_episode_record,
    validate_feed_document,
    validate_feed_item,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_episode_record():
    """Valid raw episode record."""
    return {
        "id": "ep-1",
        "title": "Hello World",
        "shortcode": "A12",
        "rawTitle": "A12_Hello_World",
        "date": "-134999-07-21",
        "published": "2024-01-01T00:00:00Z",
        "model": "PC-7",
        "integrity": "87.5%",
        "origin": "Lake Bottom",
        "locale": None,
        "tags": ["robots", "lakes"],
        "description": "Notes",
        "audioUrl": "https://example.org/a12.mp3",
        "duration": 125.5,
        "size": 2048,
    }


@pytest.fixture
def valid_feed_item():
    """Valid JSON Feed item."""
    return {
        "id": "https://example.org/a12",
        "title": "A12_Hello_World",
        "content_html": "<p>:: DATE: 5/13/1971</p>",
        "date_published": "2024-01-01T00:00:00Z",
        "attachments": [
            {
                "url": "https://example.org/a12.mp3",
                "mime_type": "audio/mpeg",
                "duration_in_seconds": 125,
                "size_in_bytes": 2048,
            }
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Schema loading"""

    @pytest.mark.parametrize("name", ["episode_record", "feed_item", "feed_document"])
    def test_shipped_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["type"] == "object"

    def test_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("feed_item") is loader.load_schema("feed_item")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_directory(self, tmp_path: Path) -> None:
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
        (tmp_path / "custom.json").write_text(json.dumps(schema), encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        assert loader.schema_dir == tmp_path
        assert loader.load_schema("custom") == schema


# =============================================================================
# EPISODE RECORD
# =============================================================================


class TestEpisodeRecordContract:
    """episode_record.json"""

    def test_valid(self, valid_episode_record) -> None:
        validate_episode_record(valid_episode_record)

    def test_empty_record_is_valid(self) -> None:
        validate_episode_record({})

    def test_integer_id_and_numeric_integrity(self, valid_episode_record) -> None:
        valid_episode_record["id"] = 12
        valid_episode_record["integrity"] = 87.5
        validate_episode_record(valid_episode_record)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("tags", "robots"),
            ("tags", [1, 2]),
            ("duration", -1),
            ("size", 1.5),
            ("size", -1),
            ("date", 1971),
            ("integrity", True),
        ],
    )
    def test_violations(self, valid_episode_record, field, value) -> None:
        valid_episode_record[field] = value
        with pytest.raises(ValidationError):
            validate_episode_record(valid_episode_record)

    def test_iter_errors_reports_each_violation(self) -> None:
        errors = list(EpisodeRecordValidator().iter_errors({"duration": -1, "size": "big"}))
        assert len(errors) == 2


# =============================================================================
# FEED
# =============================================================================


class TestFeedContracts:
    """feed_item.json and feed_document.json"""

    def test_valid_item(self, valid_feed_item) -> None:
        validate_feed_item(valid_feed_item)
        assert FeedItemValidator().is_valid(valid_feed_item)

    def test_item_requires_id(self, valid_feed_item) -> None:
        del valid_feed_item["id"]
        with pytest.raises(ValidationError):
            validate_feed_item(valid_feed_item)

    def test_item_attachment_constraints(self, valid_feed_item) -> None:
        valid_feed_item["attachments"][0]["size_in_bytes"] = -5
        assert not FeedItemValidator().is_valid(valid_feed_item)

    def test_valid_document(self, valid_feed_item) -> None:
        validate_feed_document(
            {"version": "https://jsonfeed.org/version/1.1", "title": "PodCube", "items": [valid_feed_item]}
        )

    def test_document_requires_items(self) -> None:
        with pytest.raises(ValidationError):
            validate_feed_document({"title": "PodCube"})

    def test_document_items_must_be_objects(self) -> None:
        assert not FeedDocumentValidator().is_valid({"items": ["not an object"]})
