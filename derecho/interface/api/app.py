"""FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from derecho.config import Settings
from derecho.interface.api.routes import articles, auth, comments, health, likes
from derecho.util.di.container import create_container, setup_di
from derecho.util.observability import instrument_fastapi
from derecho.util.scheduler import RateLimitSweeper


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Run the rate limit sweeper for the lifetime of the app."""
    container = app_instance.state.dishka_container
    sweeper = await container.get(RateLimitSweeper)
    sweeper.start()
    try:
        yield
    finally:
        sweeper.shutdown()
        await container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Derecho en Perspectiva API",
        description="Backend API for Derecho en Perspectiva - articles, comments, likes and email verification",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(auth.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
