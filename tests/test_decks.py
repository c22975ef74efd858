"""Tests for deck API endpoints and DeckService."""

from collections.abc import Callable

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashycardy import models
from flashycardy.exceptions import UnauthenticatedError, ValidationError
from flashycardy.services import DeckService
from flashycardy.services.revalidation import LoggingRevalidator


class TestListDecks:
    """Test suite for GET /decks endpoint."""

    def test_list_decks_returns_only_owned_decks(
        self,
        client: TestClient,
        test_user: models.User,
        other_user: models.User,
        make_deck: Callable[..., models.Deck],
    ) -> None:
        """Test that another user's decks are never listed."""
        make_deck(test_user, title="French")
        make_deck(other_user, title="Private")

        response = client.get("/api/v1/decks")

        assert response.status_code == status.HTTP_200_OK
        titles = [deck["title"] for deck in response.json()["decks"]]
        assert titles == ["French"]

    def test_list_decks_reports_total_cards(
        self,
        client: TestClient,
        test_user: models.User,
        make_deck: Callable[..., models.Deck],
        make_flashcard: Callable[..., models.Flashcard],
    ) -> None:
        """Test that total_cards sums the card counts of the listed decks."""
        first = make_deck(test_user, title="A")
        second = make_deck(test_user, title="B")
        make_flashcard(first)
        make_flashcard(first, front="ser", back="to be")
        make_flashcard(second)

        data = client.get("/api/v1/decks").json()

        assert data["total_cards"] == 3

    def test_list_decks_anonymous_is_empty(
        self, anonymous_client: TestClient, test_deck: models.Deck
    ) -> None:
        """Test that anonymous callers get an empty list rather than an error."""
        response = anonymous_client.get("/api/v1/decks")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"decks": [], "total_cards": 0}


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_deck_success(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        revalidator: LoggingRevalidator,
    ) -> None:
        """Test successful creation of an empty deck."""
        response = client.post(
            "/api/v1/decks", json={"title": "  German  ", "description": "Nouns"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        deck = data["deck"]
        assert deck["title"] == "German"
        assert deck["description"] == "Nouns"
        assert deck["card_count"] == 0
        assert deck["user_id"] == test_user.id

        db_deck = db_session.get(models.Deck, deck["id"])
        assert db_deck is not None
        assert list(revalidator.recent_paths) == ["/dashboard"]

    def test_create_deck_without_description(self, client: TestClient) -> None:
        """Test that a blank description is stored as null."""
        response = client.post("/api/v1/decks", json={"title": "Kanji", "description": "   "})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["deck"]["description"] is None

    def test_create_deck_empty_title(self, client: TestClient) -> None:
        """Test creating a deck with empty title fails."""
        response = client.post("/api/v1/decks", json={"title": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_deck_whitespace_title(
        self, client: TestClient, revalidator: LoggingRevalidator
    ) -> None:
        """Test that a whitespace-only title is rejected with the field name."""
        response = client.post("/api/v1/decks", json={"title": "   "})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["field"] == "title"
        assert list(revalidator.recent_paths) == []

    def test_create_deck_title_too_long(self, client: TestClient) -> None:
        """Test that titles longer than 255 characters are rejected."""
        response = client.post("/api/v1/decks", json={"title": "x" * 256})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_deck_title_at_limit(self, client: TestClient) -> None:
        """Test that a 255 character title is accepted."""
        response = client.post("/api/v1/decks", json={"title": "x" * 255})

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_deck_padded_title_at_limit(self, client: TestClient) -> None:
        """Test that surrounding whitespace does not count toward the title limit."""
        response = client.post("/api/v1/decks", json={"title": f"  {'x' * 255}  "})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["deck"]["title"] == "x" * 255

    def test_create_deck_anonymous(self, anonymous_client: TestClient) -> None:
        """Test that creating a deck requires authentication."""
        response = anonymous_client.post("/api/v1/decks", json={"title": "Anything"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "unauthenticated"


class TestGetDeck:
    """Test suite for GET /decks/:id endpoint."""

    def test_get_deck_success(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.get(f"/api/v1/decks/{test_deck.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Spanish verbs"

    def test_get_deck_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/decks/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "not_found"

    def test_get_foreign_deck_looks_missing(
        self,
        client: TestClient,
        other_user: models.User,
        make_deck: Callable[..., models.Deck],
    ) -> None:
        """Test that a deck owned by someone else is reported exactly like a missing one."""
        foreign = make_deck(other_user, title="Private")

        foreign_response = client.get(f"/api/v1/decks/{foreign.id}")
        missing_response = client.get("/api/v1/decks/does-not-exist")

        assert foreign_response.status_code == missing_response.status_code
        assert foreign_response.json()["error"] == missing_response.json()["error"]


class TestUpdateDeck:
    """Test suite for PUT /decks/:id endpoint."""

    def test_update_deck_success(
        self, client: TestClient, test_deck: models.Deck, revalidator: LoggingRevalidator
    ) -> None:
        response = client.put(
            f"/api/v1/decks/{test_deck.id}",
            json={"title": "Spanish, advanced", "description": "Subjunctive"},
        )

        assert response.status_code == status.HTTP_200_OK
        deck = response.json()["deck"]
        assert deck["title"] == "Spanish, advanced"
        assert deck["description"] == "Subjunctive"
        assert list(revalidator.recent_paths) == [f"/decks/{test_deck.id}", "/dashboard"]

    def test_update_deck_is_idempotent(self, client: TestClient, test_deck: models.Deck) -> None:
        """Test that repeating an update leaves the same values."""
        payload = {"title": "Same", "description": "Same description"}

        first = client.put(f"/api/v1/decks/{test_deck.id}", json=payload).json()["deck"]
        second = client.put(f"/api/v1/decks/{test_deck.id}", json=payload).json()["deck"]

        assert (first["title"], first["description"]) == (second["title"], second["description"])

    def test_update_foreign_deck(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
        make_deck: Callable[..., models.Deck],
        revalidator: LoggingRevalidator,
    ) -> None:
        """Test that updating someone else's deck fails and changes nothing."""
        foreign = make_deck(other_user, title="Private")

        response = client.put(f"/api/v1/decks/{foreign.id}", json={"title": "Hijacked"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.refresh(foreign)
        assert foreign.title == "Private"
        assert list(revalidator.recent_paths) == []


class TestDeleteDeck:
    """Test suite for DELETE /decks/:id endpoint."""

    def test_delete_deck_cascades_to_flashcards(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        test_flashcard: models.Flashcard,
        revalidator: LoggingRevalidator,
    ) -> None:
        deck_id = test_deck.id
        flashcard_id = test_flashcard.id

        response = client.delete(f"/api/v1/decks/{deck_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is None
        assert db_session.get(models.Flashcard, flashcard_id) is None
        assert list(revalidator.recent_paths) == ["/dashboard"]

    def test_delete_deck_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/decks/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_anonymous(
        self, anonymous_client: TestClient, test_deck: models.Deck
    ) -> None:
        response = anonymous_client.delete(f"/api/v1/decks/{test_deck.id}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestDeckService:
    """Service-level checks for identity and validation rules."""

    def test_list_decks_newest_first(
        self, db_session: Session, test_user: models.User
    ) -> None:
        service = DeckService(db_session)
        service.create_deck(test_user.id, "Older")
        newest = service.create_deck(test_user.id, "Newer")
        # Same-second timestamps fall back to title order, so force a later time
        newest.created_at = newest.created_at.replace(year=newest.created_at.year + 1)
        db_session.commit()

        titles = [deck.title for deck in service.list_decks(test_user.id)]

        assert titles == ["Newer", "Older"]

    def test_list_decks_without_identity(self, db_session: Session, test_deck: models.Deck) -> None:
        assert DeckService(db_session).list_decks(None) == []

    def test_get_deck_without_identity(self, db_session: Session, test_deck: models.Deck) -> None:
        assert DeckService(db_session).get_deck(None, test_deck.id) is None

    @pytest.mark.parametrize("action", ["create", "update", "delete"])
    def test_writes_without_identity_raise(
        self, db_session: Session, test_deck: models.Deck, action: str
    ) -> None:
        service = DeckService(db_session)
        with pytest.raises(UnauthenticatedError):
            if action == "create":
                service.create_deck(None, "Title")
            elif action == "update":
                service.update_deck(None, test_deck.id, "Title")
            else:
                service.delete_deck(None, test_deck.id)

    def test_update_validates_before_lookup(
        self, db_session: Session, test_user: models.User
    ) -> None:
        """Test that a bad title is reported even when the deck does not exist."""
        with pytest.raises(ValidationError) as exc_info:
            DeckService(db_session).update_deck(test_user.id, "does-not-exist", "")

        assert exc_info.value.field == "title"

    def test_update_missing_deck_returns_none(
        self, db_session: Session, test_user: models.User
    ) -> None:
        assert DeckService(db_session).update_deck(test_user.id, "does-not-exist", "T") is None

    def test_description_too_long(self, db_session: Session, test_user: models.User) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DeckService(db_session).create_deck(test_user.id, "Title", "d" * 1001)

        assert exc_info.value.field == "description"

    def test_title_length_measured_after_stripping(
        self, db_session: Session, test_user: models.User
    ) -> None:
        deck = DeckService(db_session).create_deck(test_user.id, f"\t{'t' * 255} \n")

        assert deck.title == "t" * 255

    def test_delete_foreign_deck_returns_false(
        self,
        db_session: Session,
        other_user: models.User,
        test_deck: models.Deck,
    ) -> None:
        assert DeckService(db_session).delete_deck(other_user.id, test_deck.id) is False
        assert db_session.get(models.Deck, test_deck.id) is not None
