"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from diaryfeed.api.routes import diary, health

# Create FastAPI app
app = FastAPI(
    title="Diary Feed API",
    description="Recently watched films from Letterboxd diaries",
    version="0.1.0",
)

# Configure CORS; the widget is embedded on third-party pages
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(diary.router, prefix="/api", tags=["diary"])


if __name__ == "__main__":
    import uvicorn

    from diaryfeed.config import settings

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
