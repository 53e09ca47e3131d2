"""
Tests for the outline node tree and XML decoding.
"""

import unittest

from lxml import etree

from opml_podcasts.outline import (
    OutlineNode,
    as_outline_list,
    body_outlines,
    decode_document,
)

from tests.utils import create_opml, outline


class TestAsOutlineList(unittest.TestCase):
    """Test normalization of outline collections."""

    def test_shapes(self) -> None:
        """Test None, bare node and sequence shapes."""
        node = OutlineNode({"title": "a"})

        self.assertEqual(as_outline_list(None), ())
        self.assertEqual(as_outline_list(node), (node,))
        self.assertEqual(as_outline_list([node, node]), (node, node))
        self.assertEqual(as_outline_list([]), ())


class TestDecodeDocument(unittest.TestCase):
    """Test decoding OPML text into outline nodes."""

    def test_body_outlines(self) -> None:
        """Test that the body's outlines keep attributes and nesting."""
        root = decode_document(
            create_opml(
                outline(outline(title="child"), title="parent", xmlUrl="u")
                + outline(title="sibling")
            )
        )

        nodes = body_outlines(root)

        self.assertEqual(len(nodes), 2)
        self.assertEqual(dict(nodes[0].attributes), {"title": "parent", "xmlUrl": "u"})
        self.assertEqual(nodes[0].children[0].get("title"), "child")
        self.assertEqual(nodes[1].children, ())
        self.assertIsNone(nodes[1].get("xmlUrl"))

    def test_attribute_order_preserved(self) -> None:
        """Test that attribute maps keep document order."""
        root = decode_document(
            '<opml><body><outline z="1" a="2" m="3"/></body></opml>'
        )

        self.assertEqual(list(body_outlines(root)[0].attributes), ["z", "a", "m"])

    def test_encoding_declaration_in_text(self) -> None:
        """Test text input that declares a non UTF-8 encoding."""
        root = decode_document(
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<opml><body><outline title="Café"/></body></opml>'
        )

        self.assertEqual(body_outlines(root)[0].get("title"), "Café")

    def test_namespaced_attribute_names(self) -> None:
        """Test prefixed and xml: attribute names in the attribute map."""
        root = decode_document(
            '<opml xmlns:pc="urn:x"><body>'
            '<outline pc:played="1" xml:lang="en" title="t"/>'
            "</body></opml>"
        )

        self.assertEqual(
            list(body_outlines(root)[0].attributes),
            ["pc:played", "xml:lang", "title"],
        )

    def test_syntax_error(self) -> None:
        """Test that malformed XML raises lxml's syntax error."""
        with self.assertRaises(etree.XMLSyntaxError):
            decode_document("<opml><body>")

    def test_missing_body(self) -> None:
        """Test that documents without a body have no outlines."""
        self.assertEqual(body_outlines(decode_document("<opml/>")), ())


if __name__ == "__main__":
    unittest.main()
