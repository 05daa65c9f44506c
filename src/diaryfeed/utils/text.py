"""Title decoding utilities for Letterboxd diary entries."""

from dataclasses import dataclass

RATING_SEPARATOR = " - "
FULL_STAR = "★"
HALF_STAR = "½"

# Earliest year accepted as a release year; anything at or before is treated as title text
MIN_FILM_YEAR = 1880


@dataclass(frozen=True)
class DecodedTitle:
    """Title and rating recovered from a raw diary title."""

    title: str
    rating: float = 0.0


@dataclass(frozen=True)
class RatingToken:
    """Star glyphs found after the rating separator."""

    glyph_count: int
    has_half: bool

    @classmethod
    def from_fragment(cls, fragment: str) -> "RatingToken":
        return cls(glyph_count=len(fragment), has_half=HALF_STAR in fragment)

    @property
    def value(self) -> float:
        # The half glyph occupies one character but is worth half a star
        return self.glyph_count - 0.5 if self.has_half else float(self.glyph_count)


def decode_title(raw: str) -> DecodedTitle:
    """
    Split a raw diary title into the film title and its star rating.

    Letterboxd appends the rating to the title after " - " as a run of
    star glyphs, e.g. "Paddington, 2014 - ★★★★½". Only the last separator
    is examined, and it only counts as a rating when the text after it
    starts with a star glyph; otherwise the separator belongs to the title.

    Examples:
        "Heat, 1995 - ★★★★"   → ("Heat, 1995", 4)
        "Alien - ★★★½"         → ("Alien", 3.5)
        "Alien - ½"            → ("Alien", 0.5)
        "Title - Director's Cut" → ("Title - Director's Cut", 0)
        "Se7en"                → ("Se7en", 0)

    Args:
        raw: Title string as it appears in the feed

    Returns:
        DecodedTitle with rating 0 when no rating fragment is present
    """
    index = raw.rfind(RATING_SEPARATOR)
    if index == -1:
        return DecodedTitle(title=raw)

    candidate = raw[index + len(RATING_SEPARATOR):].strip()
    if not candidate.startswith((FULL_STAR, HALF_STAR)):
        return DecodedTitle(title=raw)

    token = RatingToken.from_fragment(candidate)
    return DecodedTitle(title=raw[:index].strip(), rating=token.value)


def fold_year(title: str) -> str:
    """
    Move a trailing ", YYYY" segment into a parenthetical suffix.

    Only the last comma segment is considered. It must be exactly four
    digits and later than 1880, so "Kill, Bill, 2003" becomes
    "Kill, Bill (2003)" while "Ocean's Eleven, Redux" is left alone.

    Args:
        title: Film title with the rating already removed

    Returns:
        Title with the year folded in, or the input unchanged
    """
    parts = title.split(",")
    if len(parts) < 2:
        return title

    last_part = parts[-1].strip()
    if not _is_release_year(last_part):
        return title

    base_title = ",".join(parts[:-1]).strip()
    return f"{base_title} ({last_part})"


def _is_release_year(text: str) -> bool:
    """Check for a 4-digit ASCII year later than MIN_FILM_YEAR."""
    if len(text) != 4 or not (text.isascii() and text.isdigit()):
        return False
    return int(text) > MIN_FILM_YEAR
