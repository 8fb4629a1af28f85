"""
JSON Feed: Feed item normalization

Turns JSON Feed documents into Episodes. Episode metadata is embedded in each
item's content_html as marker lines:

    :: DATE: -134999-07-21
    :: PODCUBE MODEL: PC-7
    :: ORIGIN: Lake Bottom
    :: TAGS: robots, lakes

Item titles carry the shortcode before the first underscore:
"A12_Hello_World" -> shortcode "A12", title "Hello World".

Fetching the feed is left to the host.
"""

import logging
import re
from typing import Any, Mapping, Optional

from bs4 import BeautifulSoup
from jsonschema import ValidationError as ContractViolation
from pydantic import BaseModel, Field, ValidationError

from podcube_catalog.core.contracts import validate_feed_document, validate_feed_item
from podcube_catalog.core.domain.episode import Episode
from podcube_catalog.ingest.records import IngestConfig, episode_from_record

logger = logging.getLogger(__name__)

_BLOCK_TAGS = ["p", "div", "li", "h1", "h2", "h3", "h4", "h5", "h6"]
_META_LINE_RE = re.compile(r"^:: ([A-Z ]+): (.+)$")

# content_html key -> episode record key
_META_KEYS = {
    "date": "date",
    "podcube_model": "model",
    "integrity": "integrity",
    "origin": "origin",
    "locale": "locale",
    "region": "region",
    "zone": "zone",
    "planet": "planet",
    "tags": "tags",
}


# =============================================================================
# FEED METADATA
# =============================================================================


class FeedMetadata(BaseModel):
    """Feed-level information."""

    title: str = Field("PodCube Feed", description="Feed title")
    description: str = Field("", description="Feed description")
    icon: str = Field("", description="Feed icon URL")
    author: Optional[str] = Field(None, description="First author name")
    total: int = Field(0, ge=0, description="Number of episodes")

    model_config = {"frozen": True}


# =============================================================================
# HTML HELPERS
# =============================================================================


def strip_html(text: str) -> str:
    """Decode entities and drop tags; <br> and block-level closers become newlines."""
    soup = BeautifulSoup(text, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.append("\n")
    return soup.get_text()


def parse_content_html(content_html: str) -> dict[str, Any]:
    """
    Extract ":: KEY: value" lines.

    Keys are lowercased with spaces turned into underscores; TAGS becomes a
    list of trimmed, non-empty tags.

    Returns:
        {"date": "...", "podcube_model": "...", "tags": [...], ...}
    """
    data: dict[str, Any] = {}

    for line in strip_html(content_html).split("\n"):
        line = line.strip()
        if not line.startswith(":: "):
            continue
        match = _META_LINE_RE.match(line)
        if not match:
            continue

        key = match.group(1).lower().replace(" ", "_")
        value: Any = match.group(2).strip()
        if key == "tags":
            value = [tag.strip() for tag in value.split(",") if tag.strip()]
        data[key] = value

    return data


def split_title(raw_title: str) -> tuple[str, str]:
    """
    Split "<SHORTCODE>_<Title_Words>" into (shortcode, title).

    A title without underscores is both the shortcode and the title.
    """
    code, *title_parts = raw_title.split("_")
    shortcode = code.strip()
    title = strip_html(" ".join(title_parts)).strip()
    if not title:
        title = strip_html(raw_title).strip()

    return shortcode, title or "Untitled"


# =============================================================================
# NORMALIZATION
# =============================================================================


def feed_item_to_record(item: Mapping[str, Any]) -> dict[str, Any]:
    """Map one JSON Feed item onto an episode record."""
    content_html = item.get("content_html") or ""
    meta = parse_content_html(content_html)

    raw_title = item.get("title") or ""
    shortcode, title = split_title(raw_title)

    attachments = item.get("attachments") or []
    attachment = attachments[0] if attachments else {}

    record: dict[str, Any] = {
        "id": item.get("id"),
        "title": title,
        "shortcode": shortcode,
        "rawTitle": raw_title,
        "published": item.get("date_published"),
        "description": content_html,
        "audioUrl": attachment.get("url"),
        "duration": attachment.get("duration_in_seconds"),
        "size": attachment.get("size_in_bytes"),
        "tags": [],
    }
    for meta_key, record_key in _META_KEYS.items():
        if meta_key in meta:
            record[record_key] = meta[meta_key]

    return record


def normalize_feed_item(
    item: Mapping[str, Any],
    config: Optional[IngestConfig] = None,
) -> Episode:
    """
    Build an Episode from a JSON Feed item.

    Raises:
        jsonschema.ValidationError: If contract validation is on and fails
    """
    config = config or IngestConfig()
    if config.validate_contracts:
        validate_feed_item(dict(item))
    return episode_from_record(feed_item_to_record(item), config)


def parse_feed_document(
    document: Mapping[str, Any],
    config: Optional[IngestConfig] = None,
) -> tuple[FeedMetadata, list[Episode]]:
    """
    Parse a whole JSON Feed document.

    Args:
        document: Decoded JSON Feed
        config: Ingestion behaviour; skip_invalid drops bad items

    Returns:
        (metadata, episodes) in feed order
    """
    config = config or IngestConfig()
    if config.validate_contracts:
        validate_feed_document(dict(document))

    episodes: list[Episode] = []
    for position, item in enumerate(document.get("items") or []):
        try:
            episodes.append(normalize_feed_item(item, config))
        except (ContractViolation, ValidationError) as e:
            if not config.skip_invalid:
                raise
            logger.warning("Skipping feed item #%d (id=%r): %s", position, item.get("id"), e)

    authors = document.get("authors") or []
    metadata = FeedMetadata(
        title=document.get("title") or "PodCube Feed",
        description=document.get("description") or "",
        icon=document.get("icon") or "",
        author=(authors[0].get("name") if authors else None) or None,
        total=len(episodes),
    )

    logger.info("Parsed feed %r: %d episodes", metadata.title, metadata.total)
    return metadata, episodes
