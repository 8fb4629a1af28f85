"""Catalog: category indexing, period grouping, tag bucketing and queries.

- CatalogIndex: owns the episode list and publishes immutable snapshots
- period_grouping: chronological year -> era grouping
- tags: tag normalization and "Misc Tags" bucketing
- query: single-pass filter and stable sort
"""

from .index import (
    CatalogConfig,
    CatalogIndex,
    CatalogSnapshot,
    CategoryIndex,
    EpisodeGroup,
    build_category_index,
)
from .period_grouping import (
    DEFAULT_MIN_YEAR_GROUP_THRESHOLD,
    build_threshold_groups,
    group_periods,
    merge_adjacent_groups,
    render_period_labels,
    sort_labels_chronologically,
)
from .query import filter_and_sort, matches_search, matches_tag, sort_episodes
from .tags import (
    DEFAULT_MIN_CATEGORY_THRESHOLD,
    MISC_TAGS_LABEL,
    bucket_by_tag,
    count_tags,
    named_tags,
    normalize_tag,
)

__all__ = [
    "CatalogConfig",
    "CatalogIndex",
    "CatalogSnapshot",
    "CategoryIndex",
    "EpisodeGroup",
    "build_category_index",
    "DEFAULT_MIN_YEAR_GROUP_THRESHOLD",
    "build_threshold_groups",
    "merge_adjacent_groups",
    "group_periods",
    "render_period_labels",
    "sort_labels_chronologically",
    "filter_and_sort",
    "matches_search",
    "matches_tag",
    "sort_episodes",
    "DEFAULT_MIN_CATEGORY_THRESHOLD",
    "MISC_TAGS_LABEL",
    "bucket_by_tag",
    "count_tags",
    "named_tags",
    "normalize_tag",
]
