"""
CatalogIndex: Derived indices and queries over the episode collection

Owns the episode list. replace_items() rebuilds every derived index into a
new immutable CatalogSnapshot and publishes it with a single reference
assignment, so readers see either the old or the new snapshot, never a mix.

The year -> episodes lookup used by get_episodes_by_year() is memoized per
snapshot generation and rebuilt wholesale after every replace.
"""

import bisect
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from podcube_catalog.catalog.period_grouping import (
    DEFAULT_MIN_YEAR_GROUP_THRESHOLD,
    group_periods,
    render_period_labels,
)
from podcube_catalog.catalog.query import filter_and_sort
from podcube_catalog.catalog.tags import (
    DEFAULT_MIN_CATEGORY_THRESHOLD,
    bucket_by_tag,
    named_tags,
    normalize_tag,
)
from podcube_catalog.core.domain.criteria import FilterCriteria
from podcube_catalog.core.domain.episode import Episode
from podcube_catalog.core.domain.period import PeriodGroup, parse_period_label

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CatalogConfig:
    """Catalog thresholds."""

    # Minimum episodes for a tag to get its own bucket
    min_category_threshold: int = DEFAULT_MIN_CATEGORY_THRESHOLD

    # Minimum episodes per year group before the adjacency merge
    min_year_group_threshold: int = DEFAULT_MIN_YEAR_GROUP_THRESHOLD

    def __post_init__(self) -> None:
        if self.min_category_threshold < 1:
            raise ValueError(
                f"min_category_threshold must be >= 1, got {self.min_category_threshold}"
            )
        if self.min_year_group_threshold < 1:
            raise ValueError(
                f"min_year_group_threshold must be >= 1, got {self.min_year_group_threshold}"
            )


# =============================================================================
# SNAPSHOT
# =============================================================================


@dataclass(frozen=True)
class CategoryIndex:
    """Unique category values derived from one episode list."""

    tags: tuple[str, ...]
    models: tuple[str, ...]
    origins: tuple[str, ...]
    zones: tuple[str, ...]
    locales: tuple[str, ...]
    regions: tuple[str, ...]

    # Ascending unique years-with-data and their episode counts
    years: tuple[int, ...]
    year_counts: Mapping[int, int]

    # Consolidated period groups and their labels, chronological
    period_groups: tuple[PeriodGroup, ...]
    period_labels: tuple[str, ...]

    # Normalized tags with their own bucket
    named_tags: frozenset[str]


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable state published by CatalogIndex.replace_items()."""

    generation: int
    episodes: tuple[Episode, ...]
    categories: CategoryIndex


@dataclass(frozen=True)
class EpisodeGroup:
    """Episodes of one period label, ascending by date."""

    label: str
    episodes: list[Episode]


def build_category_index(episodes: tuple[Episode, ...], config: CatalogConfig) -> CategoryIndex:
    """
    Derive every category index from an episode list.

    Empty categorical values are excluded; tags are normalized, everything
    else is kept verbatim.
    """
    tags: set[str] = set()
    values: dict[str, set[str]] = {
        "model": set(),
        "origin": set(),
        "zone": set(),
        "locale": set(),
        "region": set(),
    }
    year_counts: Counter = Counter()

    for episode in episodes:
        for tag in episode.tags:
            normalized = normalize_tag(tag)
            if normalized:
                tags.add(normalized)
        for field, bucket in values.items():
            value = getattr(episode, field)
            if value:
                bucket.add(value)
        if episode.date is not None:
            year_counts[episode.date.year] += 1

    years = tuple(sorted(year_counts))
    groups = tuple(group_periods(years, year_counts, config.min_year_group_threshold))
    labels = tuple(render_period_labels(groups))

    return CategoryIndex(
        tags=tuple(sorted(tags)),
        models=tuple(sorted(values["model"])),
        origins=tuple(sorted(values["origin"])),
        zones=tuple(sorted(values["zone"])),
        locales=tuple(sorted(values["locale"])),
        regions=tuple(sorted(values["region"])),
        years=years,
        year_counts=dict(year_counts),
        period_groups=groups,
        period_labels=labels,
        named_tags=named_tags(episodes, config.min_category_threshold),
    )


# =============================================================================
# CATALOG INDEX
# =============================================================================

CriteriaInput = Union[FilterCriteria, Mapping[str, Any], None]


class CatalogIndex:
    """
    Category index and query engine for a list of episodes.

    Usage:
        index = CatalogIndex(config=CatalogConfig())
        index.replace_items(episodes)
        index.get_available_years()
        index.get_filtered_and_sorted_list({"tag": "robot", "sortBy": "date"})
    """

    def __init__(
        self,
        episodes: Optional[Iterable[Episode]] = None,
        config: Optional[CatalogConfig] = None,
    ):
        """
        Args:
            episodes: Initial episode list (default: empty)
            config: Thresholds (default: CatalogConfig())
        """
        self.config = config or CatalogConfig()
        self._generation = 0
        self._snapshot = self._build_snapshot(tuple(episodes or ()))

        # (generation, year -> episodes); None until first use
        self._year_cache: Optional[tuple[int, dict[int, list[Episode]]]] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def _build_snapshot(self, episodes: tuple[Episode, ...]) -> CatalogSnapshot:
        self._generation += 1
        snapshot = CatalogSnapshot(
            generation=self._generation,
            episodes=episodes,
            categories=build_category_index(episodes, self.config),
        )
        logger.debug(
            "Built catalog snapshot generation=%d: %d episodes, %d tags, %d periods",
            snapshot.generation,
            len(episodes),
            len(snapshot.categories.tags),
            len(snapshot.categories.period_labels),
        )
        return snapshot

    def replace_items(self, episodes: Iterable[Episode]) -> CatalogSnapshot:
        """
        Replace the whole episode list and rebuild every derived index.

        The new snapshot is fully built before it is published.

        Args:
            episodes: New episode list

        Returns:
            The published snapshot
        """
        snapshot = self._build_snapshot(tuple(episodes))
        self._snapshot = snapshot
        return snapshot

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._snapshot.generation

    @property
    def episodes(self) -> list[Episode]:
        return list(self._snapshot.episodes)

    @property
    def total(self) -> int:
        return len(self._snapshot.episodes)

    # -------------------------------------------------------------------------
    # Available filter options
    # -------------------------------------------------------------------------

    def get_available_filter_options(self) -> list[str]:
        return ["tags", "models", "origins", "zones", "locales", "regions", "years"]

    def get_available_tags(self) -> list[str]:
        return list(self._snapshot.categories.tags)

    def get_available_models(self) -> list[str]:
        return list(self._snapshot.categories.models)

    def get_available_origins(self) -> list[str]:
        return list(self._snapshot.categories.origins)

    def get_available_zones(self) -> list[str]:
        return list(self._snapshot.categories.zones)

    def get_available_locales(self) -> list[str]:
        return list(self._snapshot.categories.locales)

    def get_available_regions(self) -> list[str]:
        return list(self._snapshot.categories.regions)

    def get_available_years(self) -> list[str]:
        """Period labels in chronological order."""
        return list(self._snapshot.categories.period_labels)

    def get_period_groups(self) -> list[PeriodGroup]:
        return list(self._snapshot.categories.period_groups)

    # -------------------------------------------------------------------------
    # Groupings
    # -------------------------------------------------------------------------

    def _episodes_by_year(self, snapshot: CatalogSnapshot) -> dict[int, list[Episode]]:
        cache = self._year_cache
        if cache is not None and cache[0] == snapshot.generation:
            return cache[1]

        by_year: dict[int, list[Episode]] = {}
        for episode in snapshot.episodes:
            if episode.date is not None:
                by_year.setdefault(episode.date.year, []).append(episode)

        self._year_cache = (snapshot.generation, by_year)
        return by_year

    def get_episodes_by_year(self) -> list[EpisodeGroup]:
        """
        Episodes grouped by period label.

        Returns:
            Non-empty groups in chronological order, episodes ascending by date
        """
        snapshot = self._snapshot
        by_year = self._episodes_by_year(snapshot)
        years = snapshot.categories.years

        groups: list[EpisodeGroup] = []
        for label in snapshot.categories.period_labels:
            year_range = parse_period_label(label)
            lo = bisect.bisect_left(years, year_range.start)
            hi = bisect.bisect_right(years, year_range.end)

            members = [episode for year in years[lo:hi] for episode in by_year[year]]
            if members:
                members.sort(key=Episode.date_millis)
                groups.append(EpisodeGroup(label=label, episodes=members))

        return groups

    def get_episodes_by_tag(self) -> dict[str, list[Episode]]:
        """
        Episodes bucketed by normalized tag, rare tags folded into "Misc Tags".

        Returns:
            Ordered mapping; named buckets by count descending, Misc last
        """
        snapshot = self._snapshot
        return bucket_by_tag(snapshot.episodes, self.config.min_category_threshold)

    # -------------------------------------------------------------------------
    # Query
    # -------------------------------------------------------------------------

    def get_filtered_and_sorted_list(self, criteria: CriteriaInput = None) -> list[Episode]:
        """
        Ad-hoc filtered and sorted episode list.

        Does not change any state.

        Args:
            criteria: FilterCriteria or a mapping of its fields (snake_case or
                camelCase keys); None returns everything, newest published first

        Returns:
            New list of matching episodes

        Raises:
            pydantic.ValidationError: If a mapping holds invalid criteria
        """
        if criteria is None:
            criteria = FilterCriteria()
        elif not isinstance(criteria, FilterCriteria):
            criteria = FilterCriteria.model_validate(dict(criteria))

        snapshot = self._snapshot
        return filter_and_sort(snapshot.episodes, criteria, snapshot.categories.named_tags)
