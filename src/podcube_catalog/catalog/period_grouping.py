"""
Period Grouping: Chronological grouping of sparse years into eras

Years-with-data are scanned in ascending order and packed into groups that
hold at least `threshold` episodes. Groups whose years touch (next start ==
previous end + 1) are then consolidated, and each consolidated range is
rendered as a period label.

Steps:
1. Accumulate years until the episode count reaches the threshold or the
   last year is reached, then close the group
2. Merge back-to-back groups; a year absent from the data is a gap, so a
   merge never bridges it
3. Render "1971", "1 BCE" or "A-B"
4. Re-sort the labels by parsed start year

INVARIANTS:
- Groups are contiguous, non-overlapping and exhaustive over the input years
- Only the tail group may fall below the threshold
"""

import logging
from typing import Final, Mapping, Sequence

from podcube_catalog.core.domain.period import PeriodGroup, parse_period_label

logger = logging.getLogger(__name__)

DEFAULT_MIN_YEAR_GROUP_THRESHOLD: Final[int] = 5


# =============================================================================
# STEP 1: THRESHOLD GROUPS
# =============================================================================


def build_threshold_groups(
    sorted_years: Sequence[int],
    counts_by_year: Mapping[int, int],
    threshold: int,
) -> list[PeriodGroup]:
    """
    Pack ascending years into groups of at least `threshold` episodes.

    Args:
        sorted_years: Unique years, ascending
        counts_by_year: Episode count per year
        threshold: Minimum episodes per group (>= 1)

    Returns:
        Closed groups in chronological order

    Raises:
        ValueError: If threshold < 1
    """
    if threshold < 1:
        raise ValueError(f"threshold must be >= 1, got {threshold}")

    groups: list[PeriodGroup] = []
    group_start: int | None = None
    group_count = 0

    for i, year in enumerate(sorted_years):
        if group_start is None:
            group_start = year
        group_count += counts_by_year.get(year, 0)

        if group_count >= threshold or i == len(sorted_years) - 1:
            groups.append(PeriodGroup(group_start, year, group_count))
            group_start = None
            group_count = 0

    return groups


# =============================================================================
# STEP 2: ADJACENCY MERGE
# =============================================================================


def merge_adjacent_groups(groups: Sequence[PeriodGroup]) -> list[PeriodGroup]:
    """
    Consolidate groups whose year ranges are back to back.

    Args:
        groups: Closed groups in chronological order

    Returns:
        Consolidated groups with summed episode counts
    """
    if not groups:
        return []

    merged: list[PeriodGroup] = []
    current = groups[0]

    for group in groups[1:]:
        if group.start_year == current.end_year + 1:
            current = PeriodGroup(
                current.start_year,
                group.end_year,
                current.episode_count + group.episode_count,
            )
        else:
            merged.append(current)
            current = group

    merged.append(current)
    return merged


# =============================================================================
# FULL PIPELINE
# =============================================================================


def sort_labels_chronologically(labels: Sequence[str]) -> list[str]:
    """Order period labels by their parsed start year."""
    return sorted(labels, key=lambda label: parse_period_label(label).start)


def group_periods(
    sorted_years: Sequence[int],
    counts_by_year: Mapping[int, int],
    threshold: int = DEFAULT_MIN_YEAR_GROUP_THRESHOLD,
) -> list[PeriodGroup]:
    """
    Steps 1 and 2: threshold packing followed by the adjacency merge.

    Args:
        sorted_years: Unique years-with-data, ascending
        counts_by_year: Episode count per year
        threshold: Minimum episodes per group

    Returns:
        Consolidated groups in chronological order
    """
    groups = merge_adjacent_groups(build_threshold_groups(sorted_years, counts_by_year, threshold))

    logger.debug(
        "Grouped %d years into %d periods (threshold=%d)",
        len(sorted_years),
        len(groups),
        threshold,
    )
    return groups


def render_period_labels(groups: Sequence[PeriodGroup]) -> list[str]:
    """Steps 3 and 4: display labels in chronological order (no "All Years" entry)."""
    return sort_labels_chronologically([group.label for group in groups])
