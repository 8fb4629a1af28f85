"""
Records: Raw record -> Episode adapter

The only place raw date strings become CalendarValues. The catalog index
receives typed Episodes and never parses dates itself.

Record keys follow the feed's camelCase naming (rawTitle, audioUrl, ...).
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from jsonschema import ValidationError as ContractViolation
from pydantic import ValidationError

from podcube_catalog.core.calendar import CalendarValue
from podcube_catalog.core.contracts import validate_episode_record
from podcube_catalog.core.domain.episode import Episode

logger = logging.getLogger(__name__)

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IngestConfig:
    """Ingestion behaviour."""

    # Unparseable dates become None instead of the year-0 fallback
    strict_dates: bool = False

    # Check records against episode_record.json before conversion
    validate_contracts: bool = True

    # ingest_records(): log and drop invalid records instead of raising
    skip_invalid: bool = False


# =============================================================================
# FIELD COERCION
# =============================================================================


def parse_episode_date(value: Any, strict: bool = False) -> Any:
    """
    Coerce a raw date string.

    Args:
        value: Date string; empty/None -> None. Other values pass through
            and Episode validation accepts CalendarValue or datetime.date
        strict: Return None for unrecognized strings instead of the fallback

    Returns:
        CalendarValue, None, or the non-string value unchanged
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        return value

    parsed = CalendarValue.try_parse(value)
    if parsed is not None:
        return parsed

    if strict:
        logger.warning("Unrecognized episode date %r, storing no date", value)
        return None

    logger.warning("Unrecognized episode date %r, using fallback year 0", value)
    return CalendarValue(value)


def parse_published(value: Any) -> Optional[datetime]:
    """ISO 8601 timestamp ("Z" accepted) or datetime; unparseable -> None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Unparseable published timestamp %r", value)
        return None


def parse_leading_float(value: Any) -> float:
    """
    Number at the start of value; 0.0 if there is none.

    Examples:
        >>> parse_leading_float("87.5%")
        87.5
        >>> parse_leading_float("n/a")
        0.0
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)

    match = _LEADING_FLOAT_RE.match(str(value))
    return float(match.group(1)) if match else 0.0


def _text(record: Mapping[str, Any], key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None or value == "":
        return default
    return str(value)


# =============================================================================
# ADAPTER
# =============================================================================


def episode_from_record(
    record: Mapping[str, Any],
    config: Optional[IngestConfig] = None,
) -> Episode:
    """
    Build a typed Episode from a raw record.

    Args:
        record: Raw mapping (see episode_record.json)
        config: Ingestion behaviour (default: IngestConfig())

    Returns:
        Episode

    Raises:
        jsonschema.ValidationError: If contract validation is on and fails
        pydantic.ValidationError: If a field violates the Episode model
    """
    config = config or IngestConfig()

    if config.validate_contracts:
        validate_episode_record(dict(record))

    tags = record.get("tags")
    record_id = record.get("id")

    return Episode(
        id=str(record_id) if record_id not in (None, "") else None,
        title=_text(record, "title", "Untitled"),
        shortcode=_text(record, "shortcode"),
        raw_title=_text(record, "rawTitle"),
        date=parse_episode_date(record.get("date"), strict=config.strict_dates),
        published_at=parse_published(record.get("published")),
        model=_text(record, "model"),
        integrity=parse_leading_float(record.get("integrity")),
        origin=_text(record, "origin"),
        locale=_text(record, "locale"),
        region=_text(record, "region"),
        zone=_text(record, "zone"),
        planet=_text(record, "planet"),
        tags=tuple(tags) if isinstance(tags, (list, tuple)) else (),
        description=_text(record, "description"),
        audio_url=record.get("audioUrl") or None,
        duration=record.get("duration") or 0,
        size=record.get("size") or 0,
    )


def ingest_records(
    records: Iterable[Mapping[str, Any]],
    config: Optional[IngestConfig] = None,
) -> list[Episode]:
    """
    Convert many raw records.

    With config.skip_invalid, records failing the contract or the model are
    logged and dropped; otherwise the first failure propagates.
    """
    config = config or IngestConfig()
    episodes: list[Episode] = []

    for position, record in enumerate(records):
        try:
            episodes.append(episode_from_record(record, config))
        except (ContractViolation, ValidationError) as e:
            if not config.skip_invalid:
                raise
            logger.warning("Skipping invalid record #%d (id=%r): %s", position, record.get("id"), e)

    logger.debug("Ingested %d episodes", len(episodes))
    return episodes
