"""Pydantic schemas for API requests and responses."""

from diaryfeed.schemas.feed import DiaryResponse, FeedConfig, FilmRecordResponse

__all__ = [
    "DiaryResponse",
    "FeedConfig",
    "FilmRecordResponse",
]
