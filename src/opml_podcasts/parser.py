"""
Resolution of OPML outline trees into podcasts and episodes.
"""

import logging
from typing import Iterator, List, Optional, Union

from lxml import etree

from .models import Episode, Podcast
from .outline import (
    OutlineCollection,
    OutlineNode,
    as_outline_list,
    body_outlines,
    decode_document,
)


class MalformedDocument(ValueError):
    """Raised when OPML content is not well-formed XML."""


def resolve_outlines(outlines: OutlineCollection) -> List[Podcast]:
    """Collect podcasts from already decoded outline nodes.

    Walks depth-first in document order with an explicit stack. A node
    with a non-empty `xmlUrl` becomes a Podcast whose episodes are its
    direct children, and its children are still searched for further
    podcasts.
    """
    podcasts: List[Podcast] = []
    stack: List[Iterator[OutlineNode]] = [iter(as_outline_list(outlines))]

    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        if node.get("xmlUrl"):
            podcasts.append(_podcast_from_node(node))
        if node.children:
            stack.append(iter(node.children))

    return podcasts


def _podcast_from_node(node: OutlineNode) -> Podcast:
    logger = logging.getLogger(__name__)
    episodes = tuple(
        Episode.from_attributes(child.attributes) for child in node.children
    )
    title = node.get("title") or ""
    logger.debug("Resolved podcast '%s' with %d episodes", title, len(episodes))
    return Podcast(title=title, episodes=episodes)


class OpmlParser:
    """Parses OPML documents into lists of podcasts."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def from_content(
        self, content: Optional[Union[str, bytes]]
    ) -> List[Podcast]:
        """Parse OPML text into podcasts.

        Empty input gives an empty list.

        Raises:
            MalformedDocument: If the content is not well-formed XML, or is
                text that cannot be encoded as UTF-8.
        """
        if not content or not content.strip():
            self.logger.debug("Empty OPML content, no podcasts")
            return []

        try:
            root = decode_document(content)
        except (etree.XMLSyntaxError, UnicodeEncodeError) as e:
            self.logger.debug("OPML parse error: %s", e)
            raise MalformedDocument(f"Malformed OPML document: {e}") from e

        podcasts = resolve_outlines(body_outlines(root))
        self.logger.info(
            "Parsed %d podcasts with %d episodes",
            len(podcasts),
            sum(len(podcast.episodes) for podcast in podcasts),
        )
        return podcasts


def parse_opml_to_podcasts(
    content: Optional[Union[str, bytes]],
) -> List[Podcast]:
    """Parse an OPML document into podcasts and their episodes."""
    return OpmlParser().from_content(content)
