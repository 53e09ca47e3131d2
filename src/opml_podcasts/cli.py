"""
Command-line interface for the OPML podcast reader.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .library import (
    StatusFilter,
    filter_podcasts,
    sort_podcasts_by_title,
)
from .loader import load_default_podcasts, load_opml_from_file
from .models import PlayedStatus, Podcast
from .parser import MalformedDocument, parse_opml_to_podcasts
from .utils import episode_count_label, format_progress, format_release_date

STATUS_CHOICES = {
    "unplayed": PlayedStatus.UNPLAYED,
    "played": PlayedStatus.PLAYED,
    "in-progress": PlayedStatus.IN_PROGRESS,
}


class MissingArgument(Exception):
    """Raised when neither an OPML path nor --default was given."""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="opml-podcasts",
        description="Read podcasts and episodes from an OPML export",
    )
    parser.add_argument(
        "opml_path", nargs="?", help="Path to the OPML file to parse"
    )
    parser.add_argument(
        "--default",
        action="store_true",
        help="Use the bundled sample library instead of a file",
    )
    parser.add_argument(
        "--status",
        action="append",
        choices=sorted(STATUS_CHOICES),
        help="Only show episodes with this status (repeatable)",
    )
    parser.add_argument(
        "--sort", action="store_true", help="Sort podcasts by title"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a readable listing instead of JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )


def _load_podcasts(args: argparse.Namespace) -> List[Podcast]:
    if args.default:
        return load_default_podcasts()
    if not args.opml_path:
        raise MissingArgument("an OPML path or --default is required")
    return parse_opml_to_podcasts(load_opml_from_file(args.opml_path))


def _print_summary(podcasts: List[Podcast]) -> None:
    for podcast in podcasts:
        print(f"{podcast.title} ({episode_count_label(len(podcast.episodes))})")
        for episode in podcast.episodes:
            line = (
                f"  [{episode.played_status.value}] "
                f"{episode.title or 'Untitled Episode'}"
                f" - released {format_release_date(episode.release_date)}"
            )
            progress = format_progress(episode.progress)
            if episode.played_status is PlayedStatus.IN_PROGRESS and progress:
                line += f" - progress {progress}"
            print(line)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for the OPML podcast reader."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.default and args.opml_path:
        parser.error("--default cannot be combined with an OPML path")
    _configure_logging(args.verbose)

    try:
        podcasts = _load_podcasts(args)

        if args.status:
            status_filter = StatusFilter.from_statuses(
                STATUS_CHOICES[name] for name in args.status
            )
            podcasts = [
                Podcast(title=item.title, episodes=item.episodes)
                for item in filter_podcasts(podcasts, status_filter)
            ]

        if args.sort:
            podcasts = sort_podcasts_by_title(podcasts)

        if args.summary:
            _print_summary(podcasts)
        else:
            print(
                json.dumps(
                    [podcast.to_json() for podcast in podcasts],
                    indent=2,
                    ensure_ascii=False,
                )
            )

    except MissingArgument as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except (MalformedDocument, OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to parse OPML: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
