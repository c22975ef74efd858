"""Pytest configuration and fixtures."""

import os

# Settings are cached on first import, so point them at memory before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from flashycardy import models  # noqa: E402
from flashycardy.database import Base, build_engine, get_db  # noqa: E402
from flashycardy.di import get_revalidator  # noqa: E402
from flashycardy.main import app  # noqa: E402
from flashycardy.routers import auth, users  # noqa: E402
from flashycardy.services.auth_service import (  # noqa: E402
    get_current_user,
    get_optional_user_id,
    hash_password,
)
from flashycardy.services.revalidation import LoggingRevalidator  # noqa: E402

# Test engine: in-memory SQLite shared through a StaticPool, foreign keys on
test_engine = build_engine("sqlite://")

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "correct-horse-battery"  # noqa: S105


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def revalidator() -> LoggingRevalidator:
    """Revalidator that records the paths each request invalidates."""
    return LoggingRevalidator()


def _create_user(db_session: Session, email: str) -> models.User:
    user = models.User(email=email, hashed_password=hash_password(TEST_PASSWORD))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_password() -> str:
    """Plain-text password of every fixture user."""
    return TEST_PASSWORD


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """The user every authenticated client request acts as."""
    return _create_user(db_session, "owner@example.com")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """A second account, used to check that ownership is enforced."""
    return _create_user(db_session, "someone-else@example.com")


def _create_deck(
    db_session: Session,
    user: models.User,
    title: str = "Spanish verbs",
    description: str | None = "Irregular verbs in the present tense",
) -> models.Deck:
    deck = models.Deck(user_id=user.id, title=title, description=description)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def _create_flashcard(
    db_session: Session, deck: models.Deck, front: str = "tener", back: str = "to have"
) -> models.Flashcard:
    flashcard = models.Flashcard(deck_id=deck.id, front=front, back=back)
    db_session.add(flashcard)
    deck.card_count += 1
    db_session.commit()
    db_session.refresh(flashcard)
    return flashcard


@pytest.fixture
def test_deck(db_session: Session, test_user: models.User) -> models.Deck:
    return _create_deck(db_session, test_user)


@pytest.fixture
def test_flashcard(db_session: Session, test_deck: models.Deck) -> models.Flashcard:
    return _create_flashcard(db_session, test_deck)


@pytest.fixture
def make_deck(db_session: Session) -> Callable[..., models.Deck]:
    """Factory for extra decks: ``make_deck(user, title=..., description=...)``."""
    return lambda user, **kwargs: _create_deck(db_session, user, **kwargs)


@pytest.fixture
def make_flashcard(db_session: Session) -> Callable[..., models.Flashcard]:
    """Factory for extra cards: ``make_flashcard(deck, front=..., back=...)``."""
    return lambda deck, **kwargs: _create_flashcard(db_session, deck, **kwargs)


def _override_db(db_session: Session) -> None:
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def anonymous_client(
    db_session: Session, revalidator: LoggingRevalidator
) -> Generator[TestClient, Any, None]:
    """Test client with no identity; bearer tokens are checked for real."""
    _override_db(db_session)
    app.dependency_overrides[get_revalidator] = lambda: revalidator
    auth.limiter.enabled = False
    users.limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    auth.limiter.enabled = True
    users.limiter.enabled = True


@pytest.fixture
def client(
    anonymous_client: TestClient, test_user: models.User
) -> Generator[TestClient, Any, None]:
    """Test client authenticated as ``test_user``."""
    user_id = test_user.id
    app.dependency_overrides[get_current_user] = lambda: test_user
    app.dependency_overrides[get_optional_user_id] = lambda: user_id
    yield anonymous_client
