"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Feed-to-JSON conversion endpoint
    feed_api_url: str = "https://api.rss2json.com/v1/api.json"
    feed_rss_template: str = "https://letterboxd.com/{username}/rss/"
    feed_timeout: int = 30

    # Display settings
    default_count: int = 5
    max_count: int = 50

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000


# Global settings instance
settings = Settings()
