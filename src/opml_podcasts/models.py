"""
Data models for podcasts and episodes resolved from OPML outlines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class PlayedStatus(Enum):
    """Playback status of an episode."""

    UNPLAYED = "unplayed"
    PLAYED = "played"
    IN_PROGRESS = "in progress"

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "PlayedStatus":
        """Classify an episode outline; progress wins over played."""
        if attributes.get("progress"):
            return cls.IN_PROGRESS
        if attributes.get("played") == "1":
            return cls.PLAYED
        return cls.UNPLAYED


@dataclass(frozen=True)
class Episode:
    """Represents a single episode outline of a podcast.

    `release_date` and `progress` keep the raw attribute text; formatting
    for display lives in `utils`. `raw_info` is the full attribute map of
    the outline, exposed read-only.
    """

    title: str = ""
    release_date: str = ""
    played_status: PlayedStatus = PlayedStatus.UNPLAYED
    progress: Optional[str] = None
    raw_info: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        in_progress = self.played_status is PlayedStatus.IN_PROGRESS
        if in_progress != (self.progress is not None):
            raise ValueError(
                "progress must be set exactly when status is 'in progress'"
            )
        object.__setattr__(
            self, "raw_info", MappingProxyType(dict(self.raw_info))
        )

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> "Episode":
        """Create Episode from the attributes of an outline node."""
        status = PlayedStatus.from_attributes(attributes)
        return cls(
            title=attributes.get("title") or "",
            release_date=attributes.get("pubDate") or "",
            played_status=status,
            progress=(
                attributes["progress"]
                if status is PlayedStatus.IN_PROGRESS
                else None
            ),
            raw_info=attributes,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Episode":
        """Create Episode from its JSON representation."""
        status = PlayedStatus(data.get("playedStatus", "unplayed"))
        progress = data.get("progress")
        if status is PlayedStatus.IN_PROGRESS:
            progress = "" if progress is None else str(progress)
        else:
            progress = None

        return cls(
            title=data.get("title") or "",
            release_date=data.get("releaseDate") or "",
            played_status=status,
            progress=progress,
            raw_info=data.get("rawInfo") or {},
        )

    def to_json(self) -> dict[str, Any]:
        """Convert episode to JSON-serializable dictionary."""
        data: dict[str, Any] = {
            "title": self.title,
            "releaseDate": self.release_date,
            "playedStatus": self.played_status.value,
        }
        if self.progress is not None:
            data["progress"] = self.progress
        data["rawInfo"] = dict(self.raw_info)
        return data


@dataclass(frozen=True)
class Podcast:
    """Represents a podcast subscription and its episodes.

    One Podcast exists per outline node carrying an `xmlUrl`; two nodes with
    the same title give two Podcasts.
    """

    title: str
    episodes: Tuple[Episode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "episodes", tuple(self.episodes))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Podcast":
        """Create Podcast from its JSON representation."""
        episodes_data = data.get("episodes") or []
        return cls(
            title=data.get("title") or "",
            episodes=tuple(Episode.from_dict(ep) for ep in episodes_data),
        )

    def to_json(self) -> dict[str, Any]:
        """Convert podcast to JSON-serializable dictionary."""
        return {
            "title": self.title,
            "episodes": [episode.to_json() for episode in self.episodes],
        }
