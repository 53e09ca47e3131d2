"""
Outline node tree and the XML decoder that produces it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from lxml import etree

OUTLINE_TAG = "outline"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

OutlineCollection = Union[None, "OutlineNode", Sequence["OutlineNode"]]


def as_outline_list(value: Any) -> Tuple["OutlineNode", ...]:
    """Normalize an outline collection to a tuple.

    Compact decoders hand back a missing collection, a bare node for a
    single child, or a sequence for several; all three become a tuple.
    """
    if value is None:
        return ()
    if isinstance(value, OutlineNode):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class OutlineNode:
    """One `<outline>` element: its attributes and nested outlines."""

    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    children: Tuple["OutlineNode", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )
        object.__setattr__(self, "children", as_outline_list(self.children))

    def get(self, name: str) -> Optional[str]:
        """Get an attribute value, None when absent."""
        return self.attributes.get(name)

    @classmethod
    def from_element(cls, element: Any) -> "OutlineNode":
        """Build a node tree from an lxml `<outline>` element.

        Built bottom-up with an explicit stack, so nesting depth is not
        bounded by the interpreter's recursion limit.
        """
        stack = [(element, list(element.iterchildren(OUTLINE_TAG)), [])]
        while True:
            current, pending, built = stack[-1]
            if len(built) < len(pending):
                child = pending[len(built)]
                stack.append((child, list(child.iterchildren(OUTLINE_TAG)), []))
                continue

            stack.pop()
            node = cls(attributes=_attributes(current), children=tuple(built))
            if not stack:
                return node
            stack[-1][2].append(node)


def _attribute_name(element: Any, key: str) -> str:
    """Turn a Clark-notation attribute key back into `prefix:name`."""
    if not key.startswith("{"):
        return key
    qname = etree.QName(key)
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in element.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return key


def _attributes(element: Any) -> dict[str, str]:
    return {
        _attribute_name(element, key): value
        for key, value in element.attrib.items()
    }


def _make_parser(force_utf8: bool) -> etree.XMLParser:
    """Create a parser that never resolves entities or touches the network.

    `huge_tree` lifts libxml2's default nesting limit of 256 levels.
    """
    return etree.XMLParser(
        encoding="utf-8" if force_utf8 else None,
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
        remove_comments=True,
        remove_pis=True,
    )


def decode_document(content: Union[str, bytes]) -> Any:
    """Decode OPML text into an lxml root element.

    Text is always read as UTF-8, ignoring the encoding named in the XML
    declaration; bytes follow the declaration.

    Raises:
        lxml.etree.XMLSyntaxError: If the content is not well-formed XML.
    """
    if isinstance(content, str):
        return etree.fromstring(
            content.encode("utf-8"), parser=_make_parser(force_utf8=True)
        )
    return etree.fromstring(content, parser=_make_parser(force_utf8=False))


def body_outlines(root: Any) -> Tuple[OutlineNode, ...]:
    """Get the top-level outlines of `opml/body`, empty if there are none."""
    logger = logging.getLogger(__name__)

    if root.tag != "opml":
        logger.warning("Document root is <%s>, not <opml>", root.tag)
        return ()

    body = root.find("body")
    if body is None:
        logger.warning("OPML document has no <body> element")
        return ()

    return tuple(
        OutlineNode.from_element(element)
        for element in body.iterchildren(OUTLINE_TAG)
    )
