"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///./flashycardy.db"

    SECRET_KEY: str = "dev-only-secret-key-change-me-in-production"  # noqa: S105

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "FlashyCardy API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str | None = None

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 30
    REFRESH_TOKEN_SECRET_KEY: str = ""
    PASSWORD_PEPPER: str = ""

    # Registration
    ALLOW_USER_REGISTRATIONS: bool = True

    # Translation (MyMemory, no API key required)
    TRANSLATION_API_URL: str = "https://api.mymemory.translated.net/get"
    TRANSLATION_TIMEOUT_SECONDS: float = 15.0
    TRANSLATION_USER_AGENT: str = "FlashyCardy/1.0"

    @field_validator("TRANSLATION_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def validate_translation_timeout(cls, value: float) -> float:
        """Reject non-positive translation timeouts."""
        if value <= 0:
            msg = "TRANSLATION_TIMEOUT_SECONDS must be positive"
            raise ValueError(msg)
        return value


# Libraries that log every request or statement at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "uvicorn.access")


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """Route stdlib and structlog output through one renderer.

    JSON lines in production, coloured key/value output otherwise. ``level``
    overrides the per-environment default (DEBUG in development, INFO elsewhere).
    """
    root_level = logging.getLevelName(level.upper()) if level else None
    if not isinstance(root_level, int):
        root_level = logging.DEBUG if environment == "development" else logging.INFO

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
