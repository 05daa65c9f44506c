"""Errors raised when a diary feed cannot be retrieved."""


class FeedError(Exception):
    """Base class for feed retrieval failures."""

    def __init__(self, username: str, message: str) -> None:
        super().__init__(message)
        self.username = username
        self.message = message


class FeedUnavailableError(FeedError):
    """The feed endpoint could not be reached or returned a non-success status."""


class FeedFormatError(FeedError):
    """The feed endpoint answered, but the JSON envelope was unusable."""
