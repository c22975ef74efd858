from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashycardy.core import container
from flashycardy.database import DatabaseSession
from flashycardy.domain.history import HistoryAnswerResolver
from flashycardy.services.revalidation import Revalidator
from flashycardy.services.translation_service import TranslationService

T = TypeVar("T")


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Automatically handles container.db override with request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency


def get_revalidator() -> Revalidator:
    return container.revalidator()


def get_translation_service() -> TranslationService:
    return container.translation_service()


def get_history_answer_resolver() -> HistoryAnswerResolver:
    return container.history_answer_resolver()
