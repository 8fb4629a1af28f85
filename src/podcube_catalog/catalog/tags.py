"""
Tags: Tag normalization and threshold bucketing

Tags are compared in normalized form everywhere: lowercase, with one
trailing plural "s" removed ("Robots" -> "robot", "glass" stays "glass").

A normalized tag carried by at least min_category_threshold episodes gets
its own bucket ("named tag"). Every rarer tag folds into "Misc Tags".
"""

from collections import Counter
from typing import Any, Final, Iterable, Sequence

from podcube_catalog.core.domain.episode import Episode

MISC_TAGS_LABEL: Final[str] = "Misc Tags"

DEFAULT_MIN_CATEGORY_THRESHOLD: Final[int] = 2


def normalize_tag(tag: Any) -> str:
    """
    Normalize a tag for comparison.

    Examples:
        >>> normalize_tag("Robots")
        'robot'
        >>> normalize_tag("Glass")
        'glass'
        >>> normalize_tag("s")
        's'
    """
    if not isinstance(tag, str) or not tag:
        return ""

    normalized = tag.lower()
    if normalized.endswith("s") and len(normalized) > 1 and not normalized.endswith("ss"):
        normalized = normalized[:-1]
    return normalized


def episode_tag_set(episode: Episode) -> list[str]:
    """Distinct normalized tags of an episode, in first-seen order."""
    seen: dict[str, None] = {}
    for tag in episode.tags:
        normalized = normalize_tag(tag)
        if normalized:
            seen.setdefault(normalized)
    return list(seen)


def count_tags(episodes: Iterable[Episode]) -> Counter:
    """Number of episodes carrying each normalized tag."""
    counts: Counter = Counter()
    for episode in episodes:
        counts.update(episode_tag_set(episode))
    return counts


def named_tags(episodes: Iterable[Episode], min_category_threshold: int) -> frozenset[str]:
    """Normalized tags frequent enough for their own bucket."""
    return frozenset(
        tag for tag, count in count_tags(episodes).items() if count >= min_category_threshold
    )


def belongs_to_misc(episode: Episode, named: frozenset[str]) -> bool:
    """True if the episode holds at least one tag without a named bucket."""
    return any(tag not in named for tag in episode_tag_set(episode))


def bucket_by_tag(
    episodes: Sequence[Episode],
    min_category_threshold: int = DEFAULT_MIN_CATEGORY_THRESHOLD,
) -> dict[str, list[Episode]]:
    """
    Group episodes by normalized tag.

    Ordering:
    - Named buckets by episode count descending, ties alphabetical
    - "Misc Tags" last, present only when non-empty
    - Episodes inside every bucket ascending by in-universe date

    An episode appears at most once per bucket, including "Misc Tags".

    Args:
        episodes: Episodes to bucket
        min_category_threshold: Minimum episodes for a named bucket

    Returns:
        Ordered mapping of bucket label -> episodes
    """
    buckets: dict[str, list[Episode]] = {}
    for episode in episodes:
        for tag in episode_tag_set(episode):
            buckets.setdefault(tag, []).append(episode)

    named: list[tuple[str, list[Episode]]] = []
    misc: list[Episode] = []
    misc_ids: set[int] = set()

    for tag, members in buckets.items():
        if len(members) >= min_category_threshold:
            named.append((tag, members))
            continue
        for episode in members:
            if id(episode) not in misc_ids:
                misc_ids.add(id(episode))
                misc.append(episode)

    named.sort(key=lambda item: (-len(item[1]), item[0]))

    result: dict[str, list[Episode]] = {}
    for tag, members in named:
        result[tag] = sorted(members, key=Episode.date_millis)
    if misc:
        result[MISC_TAGS_LABEL] = sorted(misc, key=Episode.date_millis)

    return result
