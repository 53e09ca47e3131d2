"""
Test utilities for building OPML documents.
"""

from typing import Optional
from xml.sax.saxutils import quoteattr


def outline(body: str = "", **attributes: str) -> str:
    """Build an <outline> element with the given attributes and children."""
    attrs = "".join(
        f" {name}={quoteattr(value)}" for name, value in attributes.items()
    )
    if not body:
        return f"<outline{attrs}/>"
    return f"<outline{attrs}>{body}</outline>"


def create_opml(body: str, title: Optional[str] = "Subscriptions") -> str:
    """Wrap outline markup in a complete OPML document."""
    head = f"<head><title>{title}</title></head>" if title else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<opml version="1.0">{head}<body>{body}</body></opml>'
    )
