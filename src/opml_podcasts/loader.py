"""
Loading OPML documents from disk and the bundled default library.
"""

import json
import logging
from importlib import resources
from typing import List

from .library import sort_podcasts_by_title
from .models import Podcast

DEFAULT_DATASET = "default.json"


def load_opml_from_file(opml_file_path: str) -> str:
    """Load OPML text from a local file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    logger = logging.getLogger(__name__)
    logger.info("Loading OPML from %s", opml_file_path)
    with open(opml_file_path, "r", encoding="utf-8") as f:
        opml_content = f.read()

    logger.info("Successfully loaded OPML content (%d chars)", len(opml_content))
    return opml_content


def load_default_podcasts() -> List[Podcast]:
    """Load the bundled sample library, sorted by title."""
    logger = logging.getLogger(__name__)
    dataset = resources.files("opml_podcasts").joinpath("data", DEFAULT_DATASET)
    data = json.loads(dataset.read_text(encoding="utf-8"))
    podcasts = [Podcast.from_dict(item) for item in data]
    logger.info("Loaded %d default podcasts", len(podcasts))
    return sort_podcasts_by_title(podcasts)
