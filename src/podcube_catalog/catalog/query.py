"""
Query: Single-pass episode filter and stable sort

Filters combine with AND:
- free-text search over title, description, location and normalized tags
- tag match, including the virtual "Misc Tags" selector
- exact model/origin/zone/locale/region match
- inclusive year range from a period label

Sorting is stable. Missing sort keys coalesce to 0, "" or the epoch.
"""

from typing import Any, Callable, Iterable, Optional

from podcube_catalog.catalog.tags import (
    MISC_TAGS_LABEL,
    belongs_to_misc,
    episode_tag_set,
    normalize_tag,
)
from podcube_catalog.core.domain.criteria import FilterCriteria, SortKey
from podcube_catalog.core.domain.episode import Episode
from podcube_catalog.core.domain.period import YearRange

CATEGORICAL_FIELDS = ("model", "origin", "zone", "locale", "region")


# =============================================================================
# PREDICATES
# =============================================================================


def matches_search(episode: Episode, query: str) -> bool:
    """Case-insensitive substring match; tags are compared normalized."""
    needle = query.lower()
    if needle in episode.title.lower():
        return True
    if needle in episode.description.lower():
        return True
    if needle in episode.location.lower():
        return True

    tag_needle = normalize_tag(query)
    return any(tag_needle in tag for tag in episode_tag_set(episode))


def matches_tag(episode: Episode, tag: str, named: frozenset[str]) -> bool:
    """
    Tag filter.

    The "Misc Tags" selector matches episodes holding any tag without a named
    bucket; an episode without tags never matches.
    """
    tags = episode_tag_set(episode)
    if not tags:
        return False

    selected = normalize_tag(tag)
    if selected == normalize_tag(MISC_TAGS_LABEL):
        return belongs_to_misc(episode, named)
    return selected in tags


def matches_year(episode: Episode, year_range: YearRange) -> bool:
    if episode.date is None:
        return False
    return year_range.contains(episode.date.year)


# =============================================================================
# SORTING
# =============================================================================


def _title_key(episode: Episode) -> str:
    return episode.title.lower() if episode.title else ""


SORT_KEYS: dict[SortKey, Callable[[Episode], Any]] = {
    SortKey.PUBLISHED: Episode.published_millis,
    SortKey.DATE: Episode.date_millis,
    SortKey.TITLE: _title_key,
    SortKey.DURATION: lambda episode: episode.duration or 0,
    SortKey.INTEGRITY: lambda episode: episode.integrity or 0,
}


def sort_episodes(
    episodes: Iterable[Episode],
    sort_by: SortKey = SortKey.PUBLISHED,
    ascending: bool = False,
) -> list[Episode]:
    """Stable sort; equal keys keep their input order in both directions."""
    return sorted(episodes, key=SORT_KEYS[sort_by], reverse=not ascending)


# =============================================================================
# QUERY
# =============================================================================


def filter_and_sort(
    episodes: Iterable[Episode],
    criteria: FilterCriteria,
    named: frozenset[str],
) -> list[Episode]:
    """
    Apply every filter of `criteria` in one pass, then sort.

    Args:
        episodes: Episodes to query
        criteria: Filter/sort instructions
        named: Normalized tags that have their own bucket (for "Misc Tags")

    Returns:
        New list of matching episodes
    """
    year_range: Optional[YearRange] = criteria.year_range()
    categorical = [
        (field, getattr(criteria, field))
        for field in CATEGORICAL_FIELDS
        if getattr(criteria, field)
    ]

    def keep(episode: Episode) -> bool:
        if criteria.search_query and not matches_search(episode, criteria.search_query):
            return False
        if criteria.tag and not matches_tag(episode, criteria.tag, named):
            return False
        for field, value in categorical:
            if getattr(episode, field) != value:
                return False
        if year_range is not None and not matches_year(episode, year_range):
            return False
        return True

    return sort_episodes(
        (episode for episode in episodes if keep(episode)),
        criteria.sort_by,
        criteria.sort_ascending,
    )
