"""
FilterCriteria: Query model for CatalogIndex.get_filtered_and_sorted_list()

Accepts snake_case field names and the camelCase keys used by feed clients
(searchQuery, sortBy, sortAscending). Empty strings mean "no constraint".
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from podcube_catalog.core.domain.period import (
    ALL_YEARS_LABEL,
    YearRange,
    parse_period_label,
)


# =============================================================================
# ENUMS
# =============================================================================


class SortKey(str, Enum):
    """Sortable episode property"""

    PUBLISHED = "published"
    DATE = "date"
    TITLE = "title"
    DURATION = "duration"
    INTEGRITY = "integrity"


# Alternate spellings accepted for sort_by
_SORT_KEY_ALIASES = {
    "rawDate": SortKey.DATE,
    "raw_date": SortKey.DATE,
    "publishedAt": SortKey.PUBLISHED,
    "published_at": SortKey.PUBLISHED,
}


# =============================================================================
# CRITERIA
# =============================================================================


class FilterCriteria(BaseModel):
    """
    Filter and sort instructions.

    All filters are optional and combine with AND. Sorting defaults to
    most recently published first.
    """

    search_query: Optional[str] = Field(
        None, alias="searchQuery", description="Substring of title/description/location/tags"
    )
    tag: Optional[str] = Field(None, description='Tag to match, or "Misc Tags"')
    model: Optional[str] = Field(None, description="Exact device model")
    origin: Optional[str] = Field(None, description="Exact origin")
    zone: Optional[str] = Field(None, description="Exact zone")
    locale: Optional[str] = Field(None, description="Exact locale")
    region: Optional[str] = Field(None, description="Exact region")
    year: Optional[str] = Field(
        None, description='Period label, e.g. "1971" or "135000 BCE-1 BCE"; "All Years" = any'
    )
    sort_by: SortKey = Field(SortKey.PUBLISHED, alias="sortBy", description="Sort property")
    sort_ascending: bool = Field(
        False, alias="sortAscending", description="Ascending order (default: descending)"
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator(
        "search_query", "tag", "model", "origin", "zone", "locale", "region", "year",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("sort_by", mode="before")
    @classmethod
    def resolve_sort_alias(cls, v: Any) -> Any:
        if v is None:
            return SortKey.PUBLISHED
        if isinstance(v, str) and v in _SORT_KEY_ALIASES:
            return _SORT_KEY_ALIASES[v]
        return v

    @field_validator("sort_ascending", mode="before")
    @classmethod
    def none_is_descending(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("year")
    @classmethod
    def validate_year_label(cls, v: Optional[str]) -> Optional[str]:
        """Period labels must parse; "All Years" is kept as the no-op marker."""
        if v is None or v == ALL_YEARS_LABEL:
            return v
        parse_period_label(v)
        return v

    def year_range(self) -> Optional[YearRange]:
        """Inclusive year constraint, or None for no constraint."""
        if self.year is None or self.year == ALL_YEARS_LABEL:
            return None
        return parse_period_label(self.year)
