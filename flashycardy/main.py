"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flashycardy import models  # noqa: F401  registers tables on Base.metadata
from flashycardy.config import configure_logging, get_settings
from flashycardy.database import Base, dispose_engine, get_engine, initialize_database
from flashycardy.exceptions import FlashyCardyError
from flashycardy.routers import auth, british_history, decks, flashcards, translate, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    initialize_database(settings)
    if settings.DATABASE_URL.startswith("sqlite"):
        # Local SQLite has no migration step; production runs alembic
        Base.metadata.create_all(bind=get_engine())
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
    try:
        yield
    finally:
        dispose_engine()


async def flashycardy_error_handler(request: Request, exc: FlashyCardyError) -> JSONResponse:
    """Render any FlashyCardyError as its status code and error payload."""
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.limiter = users.limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_exception_handler(FlashyCardyError, flashycardy_error_handler)  # type: ignore[arg-type]

    for module in (auth, users, decks, flashcards, british_history, translate):
        app.include_router(module.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok", "app": settings.PROJECT_NAME, "version": settings.VERSION}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
