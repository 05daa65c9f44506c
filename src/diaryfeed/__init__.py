"""Letterboxd diary feed decoding."""

from diaryfeed.models import FilmRecord, RawFeedItem
from diaryfeed.services.film_builder import build_film_records
from diaryfeed.utils.text import DecodedTitle, decode_title, fold_year

__all__ = [
    "DecodedTitle",
    "FilmRecord",
    "RawFeedItem",
    "build_film_records",
    "decode_title",
    "fold_year",
]
