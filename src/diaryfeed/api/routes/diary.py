"""Diary feed API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import ValidationError

from diaryfeed.config import settings
from diaryfeed.exceptions import FeedError
from diaryfeed.schemas import DiaryResponse, FeedConfig, FilmRecordResponse
from diaryfeed.services.feed_client import FeedClient

logger = logging.getLogger(__name__)
router = APIRouter()


def get_feed_client() -> FeedClient:
    return FeedClient()


@router.get("/diary/{username}", response_model=DiaryResponse)
async def get_diary(
    username: str = Path(..., min_length=1, description="Letterboxd username"),
    count: int = Query(
        settings.default_count, ge=1, le=settings.max_count, description="Number of films"
    ),
    client: FeedClient = Depends(get_feed_client),
) -> DiaryResponse:
    """
    Latest films from a user's Letterboxd diary.

    An empty diary returns an empty film list; a feed that cannot be
    fetched or parsed returns 502.
    """
    try:
        config = FeedConfig(username=username, count=count)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail="Username must not be blank") from e

    try:
        records = await client.fetch_films(config)
    except FeedError as e:
        logger.error(f"Could not load diary for '{config.username}': {e.message}")
        raise HTTPException(
            status_code=502,
            detail=f"Could not load films for user: {config.username}.",
        ) from e

    return DiaryResponse(
        username=config.username,
        count=config.count,
        films=[FilmRecordResponse.from_record(record) for record in records],
    )
