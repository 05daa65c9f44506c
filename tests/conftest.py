"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from diaryfeed.api.routes import diary, health


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app with the diary and health routers, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(diary.router, prefix="/api")
    return app
