"""
Episode: Catalog item model

Immutable Pydantic model for one catalog episode. The in-universe date is a
CalendarValue; the dumped ISO string validates back to the same value.
published_at is the ordinary release timestamp.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from podcube_catalog.core.calendar import CalendarValue, humanize_interval


class Episode(BaseModel):
    """
    Catalog episode.

    Immutable model (frozen=True). Contains:
    - Identification (id, title, shortcode)
    - Temporal data (in-universe date, publication timestamp)
    - Recording data (device model, integrity)
    - Location hierarchy (origin > locale > region > zone > planet)
    - Content (tags, description) and audio properties
    """

    # Identification
    id: Optional[str] = Field(None, description="Unique episode identifier")
    title: str = Field("Untitled", description="Cleaned display title")
    shortcode: str = Field("", description="Episode reference code")
    raw_title: str = Field("", description="Original unprocessed title")

    # Temporal
    date: Optional[CalendarValue] = Field(None, description="In-universe recording date")
    published_at: Optional[datetime] = Field(None, description="Release timestamp")

    # Recording
    model: str = Field("", description="Recording device model")
    integrity: float = Field(0.0, description="Data integrity percentage (0-100)")

    # Location hierarchy
    origin: str = Field("", description="Primary recording location")
    locale: str = Field("", description="Specific area within origin")
    region: str = Field("", description="Broader geographical region")
    zone: str = Field("", description="Administrative or geological zone")
    planet: str = Field("", description="Planetary body")

    # Content
    tags: tuple[str, ...] = Field((), description="Categorical tags, verbatim")
    description: str = Field("", description="Episode notes")

    # Audio
    audio_url: Optional[str] = Field(None, description="Direct audio link")
    duration: float = Field(0.0, ge=0, description="Length in seconds")
    size: int = Field(0, ge=0, description="File size in bytes")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> Any:
        """ISO strings and datetime.date values become CalendarValues."""
        if v is None or v == "":
            return None
        try:
            return CalendarValue.from_any(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @field_validator("tags")
    @classmethod
    def drop_empty_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Empty tag strings carry no category."""
        return tuple(tag for tag in v if tag)

    @field_serializer("date")
    def serialize_date(self, v: Optional[CalendarValue]) -> Optional[str]:
        return v.to_iso_string() if v is not None else None

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def year(self) -> Optional[int]:
        return self.date.year if self.date is not None else None

    @property
    def location_parts(self) -> list[str]:
        return [
            part
            for part in (self.origin, self.locale, self.region, self.zone, self.planet)
            if part
        ]

    @property
    def location(self) -> str:
        """Comma-joined location hierarchy, empty levels skipped."""
        return ", ".join(self.location_parts)

    @property
    def location_lines(self) -> str:
        return "\n".join(self.location_parts)

    @property
    def short_date(self) -> str:
        """e.g. "05/13/1971"; empty when the episode has no date."""
        if self.date is None:
            return ""
        return self.date.to_locale_string("en-US", year="numeric", month="2-digit", day="2-digit")

    @property
    def long_date(self) -> str:
        """e.g. "Thursday, May 13, 1971"; empty when the episode has no date."""
        if self.date is None:
            return ""
        return self.date.to_locale_string(
            "en-US", weekday="long", year="numeric", month="long", day="numeric"
        )

    @property
    def integrity_label(self) -> str:
        return f"{self.integrity:g}%"

    @property
    def minutes_seconds(self) -> str:
        total = int(self.duration)
        return f"{total // 60:02d}:{total % 60:02d}"

    @property
    def duration_minutes(self) -> str:
        return f"{self.duration / 60:.2f}"

    def date_millis(self) -> int:
        """Sort key on the in-universe time axis; 0 when undated."""
        return self.date.get_time() if self.date is not None else 0

    def published_millis(self) -> float:
        """Sort key on the release axis; 0 (epoch) when unknown. Naive times count as UTC."""
        if self.published_at is None:
            return 0.0
        published = self.published_at
        if published.tzinfo is None:
            published = published.replace(tzinfo=timezone.utc)
        return published.timestamp() * 1000.0

    def till_today(self, today: Optional[CalendarValue] = None) -> str:
        """Humanized distance from today, or "Unknown" when undated."""
        if self.date is None:
            return "Unknown"
        return humanize_interval(self.date, today)
