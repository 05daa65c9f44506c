"""Turn raw diary feed items into display records."""

from collections.abc import Sequence

from diaryfeed.models import FilmRecord, RawFeedItem
from diaryfeed.utils.text import decode_title, fold_year


def build_film_record(item: RawFeedItem) -> FilmRecord:
    """Decode a single feed item into a FilmRecord."""
    decoded = decode_title(item.title)
    return FilmRecord(
        display_title=fold_year(decoded.title),
        rating=decoded.rating,
        link=item.link,
    )


def build_film_records(items: Sequence[RawFeedItem], count: int) -> list[FilmRecord]:
    """
    Build display records for the first ``count`` feed items.

    Feed order (most recent first) is preserved. Fewer items than
    ``count`` is fine; all of them are returned.

    Args:
        items: Feed items in feed order
        count: Maximum number of records to return

    Returns:
        List of FilmRecord in the same order as ``items``

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError("count must not be negative")
    return [build_film_record(item) for item in items[:count]]
