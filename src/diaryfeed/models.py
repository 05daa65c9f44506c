"""Data models for diary feed entries and display records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RawFeedItem:
    """
    A single diary entry as it arrives from the feed.

    The title is the loosely structured Letterboxd string, e.g.
    "Paddington, 2014 - ★★★★½". The decoders turn it into a FilmRecord.
    """

    title: str  # Raw title, may carry a year segment and rating glyphs
    link: str  # Letterboxd diary entry URL


@dataclass(frozen=True)
class FilmRecord:
    """A watched film, ready for display."""

    display_title: str  # Clean title with the year folded in, e.g. "Paddington (2014)"
    rating: float  # 0 to 5 in half-star steps, 0 when unrated
    link: str
