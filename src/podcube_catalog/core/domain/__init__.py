"""
Domain models and value objects.

Contains the catalog entities: Episode, period labels and ranges, and the
filter/sort criteria model.
"""

from podcube_catalog.core.domain.criteria import FilterCriteria, SortKey
from podcube_catalog.core.domain.episode import Episode
from podcube_catalog.core.domain.period import (
    ALL_YEARS_LABEL,
    PeriodGroup,
    PeriodLabelError,
    YearRange,
    format_range_label,
    format_year_label,
    parse_period_label,
    parse_year_label,
)

__all__ = [
    # Episode model
    "Episode",
    # Period labels
    "ALL_YEARS_LABEL",
    "PeriodGroup",
    "PeriodLabelError",
    "YearRange",
    "format_year_label",
    "format_range_label",
    "parse_year_label",
    "parse_period_label",
    # Criteria
    "FilterCriteria",
    "SortKey",
]
