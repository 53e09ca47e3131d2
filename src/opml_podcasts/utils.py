"""
Display helpers for episode metadata.
"""

import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Optional

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def _parse_release_date(value: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        pass
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def format_release_date(value: str) -> str:
    """Format a raw pubDate as e.g. 'Jan 1, 2024'.

    Dates are shown as written in the feed, without timezone conversion.
    Unparseable text is returned as is.
    """
    if not value:
        return "Unknown"
    parsed = _parse_release_date(value)
    if parsed is None:
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def format_progress(seconds_text: Optional[str]) -> Optional[str]:
    """Format elapsed seconds as HH:MM:SS; None if there is no number."""
    if not seconds_text:
        return None
    match = _LEADING_DIGITS.match(seconds_text)
    if not match:
        return None

    total_seconds = int(match.group(1))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def episode_count_label(count: int) -> str:
    """Human-readable episode count."""
    return f"{count} episode{'' if count == 1 else 's'}"
