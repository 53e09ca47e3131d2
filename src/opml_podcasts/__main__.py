"""Allow running the reader with ``python -m opml_podcasts``."""

from .cli import main

main()
