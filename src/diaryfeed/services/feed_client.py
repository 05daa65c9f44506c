"""Client for fetching Letterboxd diary feeds through a feed-to-JSON endpoint."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from diaryfeed.config import settings
from diaryfeed.exceptions import FeedFormatError, FeedUnavailableError
from diaryfeed.models import FilmRecord, RawFeedItem
from diaryfeed.schemas.feed import FeedConfig
from diaryfeed.services.film_builder import build_film_records

logger = logging.getLogger(__name__)


class FeedClient:
    """
    Client for a user's Letterboxd RSS feed.

    Letterboxd only publishes RSS, so the feed is requested through an
    rss2json-style endpoint that wraps it in a JSON envelope:
    {"status": "ok", "items": [{"title": ..., "link": ...}, ...]}.
    """

    def __init__(
        self,
        api_url: str | None = None,
        timeout: int | None = None,
        rss_template: str | None = None,
    ) -> None:
        """
        Initialize feed client.

        Args:
            api_url: Feed-to-JSON endpoint (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
            rss_template: RSS URL template with a {username} field (uses settings if not provided)
        """
        self.api_url = api_url or settings.feed_api_url
        self.timeout = timeout if timeout is not None else settings.feed_timeout
        self.rss_template = rss_template or settings.feed_rss_template

    def rss_url(self, username: str) -> str:
        """Letterboxd RSS URL for a username."""
        return self.rss_template.format(username=quote(username.strip(), safe=""))

    async def fetch_items(self, username: str) -> list[RawFeedItem]:
        """
        Fetch the diary entries for a user.

        Args:
            username: Letterboxd username

        Returns:
            Feed items in feed order (most recent first); empty for an empty feed

        Raises:
            FeedUnavailableError: Network failure or non-success HTTP status
            FeedFormatError: Body is not a usable JSON feed envelope
        """
        params = {"rss_url": self.rss_url(username)}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Feed request error for '{username}': {e}")
            raise FeedUnavailableError(username, f"Feed request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Feed response for '{username}' is not JSON: {e}")
            raise FeedFormatError(username, "Feed response is not valid JSON") from e

        items = self._parse_envelope(username, data)
        logger.info(f"Feed for '{username}': found {len(items)} items")
        return items

    async def fetch_films(self, config: FeedConfig) -> list[FilmRecord]:
        """Fetch a user's feed and build display records for the first config.count items."""
        items = await self.fetch_items(config.username)
        return build_film_records(items, config.count)

    def _parse_envelope(self, username: str, data: Any) -> list[RawFeedItem]:
        """Validate the JSON envelope and extract its items."""
        if not isinstance(data, dict):
            raise FeedFormatError(username, "Feed envelope is not a JSON object")

        status = data.get("status")
        if status != "ok":
            message = data.get("message") or f"Feed endpoint returned status {status!r}"
            logger.error(f"Feed endpoint rejected '{username}': {message}")
            raise FeedFormatError(username, message)

        entries = data.get("items")
        if not isinstance(entries, list):
            raise FeedFormatError(username, "Feed envelope has no item list")

        items: list[RawFeedItem] = []
        for entry in entries:
            item = self._parse_item(entry)
            if item is None:
                logger.warning(f"Feed for '{username}': skipping malformed item {entry!r}")
                continue
            items.append(item)
        return items

    @staticmethod
    def _parse_item(entry: Any) -> RawFeedItem | None:
        """Build a RawFeedItem from one envelope entry, or None if fields are missing."""
        if not isinstance(entry, dict):
            return None
        title = entry.get("title")
        link = entry.get("link")
        if not isinstance(title, str) or not title or not isinstance(link, str):
            return None
        return RawFeedItem(title=title, link=link)
