"""Print the latest films from a user's Letterboxd diary."""

import argparse
import asyncio
import logging
import sys

from diaryfeed.config import settings
from diaryfeed.exceptions import FeedError
from diaryfeed.models import FilmRecord
from diaryfeed.schemas import FeedConfig
from diaryfeed.services.feed_client import FeedClient
from diaryfeed.services.rating_display import rating_label


def format_film_list(records: list[FilmRecord]) -> list[str]:
    """One numbered line per film: title, then the rating label."""
    return [
        f"{i:>3}. {record.display_title}  ({rating_label(record.rating)})"
        for i, record in enumerate(records, start=1)
    ]


async def show_diary(config: FeedConfig) -> bool:
    """Print the film list and return False if the feed could not be loaded."""
    try:
        records = await FeedClient().fetch_films(config)
    except FeedError as e:
        print(f"Could not load films for user: {config.username}. ({e.message})", file=sys.stderr)
        return False

    if not records:
        print("No films found in the feed.")
        return True

    for line in format_film_list(records):
        print(line)
    return True


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Show recently watched films from a Letterboxd diary."
    )
    parser.add_argument("username", help="Letterboxd username")
    parser.add_argument(
        "--count",
        type=positive_int,
        default=settings.default_count,
        metavar="N",
        help=f"Number of films to show (default: {settings.default_count})",
    )
    args = parser.parse_args()
    if not args.username.strip():
        parser.error("username must not be blank")

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    ok = asyncio.run(show_diary(FeedConfig(username=args.username, count=args.count)))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
