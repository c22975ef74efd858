"""Signal that cached views of a path are stale after a mutation."""

from collections import deque
from typing import Protocol

import structlog

structlog_logger = structlog.get_logger(__name__)

DASHBOARD_PATH = "/dashboard"


def deck_path(deck_id: str) -> str:
    return f"/decks/{deck_id}"


class Revalidator(Protocol):
    """Anything that can invalidate a rendered view by path."""

    def revalidate_path(self, path: str) -> None: ...


class LoggingRevalidator:
    """Default revalidator: emits a structured log event per stale path.

    Keeps the most recent paths so a front end polling the API, or a test,
    can see what was invalidated.
    """

    def __init__(self, history_size: int = 100) -> None:
        self.recent_paths: deque[str] = deque(maxlen=history_size)

    def revalidate_path(self, path: str) -> None:
        self.recent_paths.append(path)
        structlog_logger.info("path_revalidated", path=path)


def revalidate_deck(revalidator: Revalidator, deck_id: str) -> None:
    """Invalidate a deck's page and the dashboard listing."""
    revalidator.revalidate_path(deck_path(deck_id))
    revalidator.revalidate_path(DASHBOARD_PATH)


def revalidate_dashboard(revalidator: Revalidator) -> None:
    revalidator.revalidate_path(DASHBOARD_PATH)
