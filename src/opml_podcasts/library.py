"""
Filtering and ordering of a resolved podcast library for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import Episode, PlayedStatus, Podcast


@dataclass(frozen=True)
class StatusFilter:
    """Which played statuses are shown. Everything is shown by default."""

    unplayed: bool = True
    played: bool = True
    in_progress: bool = True

    @classmethod
    def from_statuses(cls, statuses: Iterable[PlayedStatus]) -> "StatusFilter":
        """Create a filter showing only the given statuses."""
        wanted = set(statuses)
        return cls(
            unplayed=PlayedStatus.UNPLAYED in wanted,
            played=PlayedStatus.PLAYED in wanted,
            in_progress=PlayedStatus.IN_PROGRESS in wanted,
        )

    def allows(self, status: PlayedStatus) -> bool:
        """Check whether episodes with this status are shown."""
        return {
            PlayedStatus.UNPLAYED: self.unplayed,
            PlayedStatus.PLAYED: self.played,
            PlayedStatus.IN_PROGRESS: self.in_progress,
        }[status]


@dataclass(frozen=True)
class FilteredPodcast:
    """A podcast reduced to its visible episodes.

    `original_index` is the podcast's position in the unfiltered list, so a
    selection can be matched across filter changes.
    """

    podcast: Podcast
    episodes: Tuple[Episode, ...]
    original_index: int

    @property
    def title(self) -> str:
        """Title of the underlying podcast."""
        return self.podcast.title


def filter_podcasts(
    podcasts: Sequence[Podcast], status_filter: StatusFilter
) -> List[FilteredPodcast]:
    """Keep allowed episodes, dropping podcasts left with none."""
    filtered: List[FilteredPodcast] = []
    for index, podcast in enumerate(podcasts):
        episodes = tuple(
            episode
            for episode in podcast.episodes
            if status_filter.allows(episode.played_status)
        )
        if episodes:
            filtered.append(
                FilteredPodcast(
                    podcast=podcast, episodes=episodes, original_index=index
                )
            )
    return filtered


def find_by_original_index(
    filtered: Sequence[FilteredPodcast], index: Optional[int]
) -> Optional[FilteredPodcast]:
    """Find the selected podcast, None if it was filtered out."""
    if index is None:
        return None
    for item in filtered:
        if item.original_index == index:
            return item
    return None


def sort_podcasts_by_title(podcasts: Iterable[Podcast]) -> List[Podcast]:
    """Sort podcasts by title, ignoring case. Ties keep their order."""
    return sorted(podcasts, key=lambda podcast: podcast.title.casefold())
