"""Pydantic schemas for diary feed configuration and responses."""

from pydantic import BaseModel, ConfigDict, Field

from diaryfeed.config import settings
from diaryfeed.models import FilmRecord
from diaryfeed.services.rating_display import rating_label, star_fill_percent


class FeedConfig(BaseModel):
    """Host configuration for a diary feed: whose feed, and how many films."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=1)
    count: int = Field(default_factory=lambda: settings.default_count, gt=0)


class FilmRecordResponse(BaseModel):
    """Film record with its star-row display values."""

    display_title: str
    rating: float
    link: str
    star_percent: float
    rating_label: str

    @classmethod
    def from_record(cls, record: FilmRecord) -> "FilmRecordResponse":
        return cls(
            display_title=record.display_title,
            rating=record.rating,
            link=record.link,
            star_percent=star_fill_percent(record.rating),
            rating_label=rating_label(record.rating),
        )


class DiaryResponse(BaseModel):
    """Recently watched films for one user."""

    username: str
    count: int
    films: list[FilmRecordResponse]
