from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashycardy.domain.history import HistoryAnswerResolver
from flashycardy.services.deck_service import DeckService
from flashycardy.services.flashcard_service import FlashcardService
from flashycardy.services.revalidation import LoggingRevalidator
from flashycardy.services.translation_service import TranslationService
from flashycardy.services.users_service import UserService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided per request
    db = providers.Dependency(instance_of=Session)

    # Gateway services
    deck_service = providers.Factory(DeckService, db=db)
    flashcard_service = providers.Factory(FlashcardService, db=db)
    user_service = providers.Factory(UserService, db=db)

    # Stateless collaborators (no db)
    history_answer_resolver = providers.Singleton(HistoryAnswerResolver)
    translation_service = providers.Singleton(TranslationService.from_settings)
    revalidator = providers.Singleton(LoggingRevalidator)


container = Container()
