"""
OPML podcast package - Reads OPML subscription exports into a flat model of
podcasts and episodes with their playback status.

The parser walks nested outline folders, treats outlines carrying an
`xmlUrl` as podcasts and their direct children as episodes.
"""

from .library import StatusFilter, filter_podcasts, sort_podcasts_by_title
from .loader import load_default_podcasts, load_opml_from_file
from .models import Episode, PlayedStatus, Podcast
from .outline import OutlineNode
from .parser import (
    MalformedDocument,
    OpmlParser,
    parse_opml_to_podcasts,
    resolve_outlines,
)

__all__ = [
    "Episode",
    "MalformedDocument",
    "OpmlParser",
    "OutlineNode",
    "PlayedStatus",
    "Podcast",
    "StatusFilter",
    "filter_podcasts",
    "load_default_podcasts",
    "load_opml_from_file",
    "parse_opml_to_podcasts",
    "resolve_outlines",
    "sort_podcasts_by_title",
]
