"""Tests for study session endpoints."""

from datetime import timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from spacerep import models
from spacerep.utils import utc_now
from tests.conftest import create_test_card, create_test_deck, reviewed_state


class TestStudyQueue:
    """Test suite for GET /study/queue."""

    def test_due_reviews_before_new_cards(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        now = utc_now()
        new_card = create_test_card(db_session, test_user.id, test_deck.id, front_content="new")
        slightly_due = create_test_card(
            db_session, test_user.id, test_deck.id, **reviewed_state(now - timedelta(hours=1))
        )
        very_overdue = create_test_card(
            db_session, test_user.id, test_deck.id, **reviewed_state(now - timedelta(days=5))
        )
        create_test_card(
            db_session, test_user.id, test_deck.id, **reviewed_state(now + timedelta(days=2))
        )

        response = client.get("/api/v1/study/queue", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [c["id"] for c in data["cards"]] == [very_overdue.id, slightly_due.id, new_card.id]
        assert data["review_count"] == 2
        assert data["new_count"] == 1
        assert data["reviews_remaining_today"] == 200
        assert data["new_cards_remaining_today"] == 20

    def test_queue_respects_limit(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        for i in range(5):
            create_test_card(db_session, test_user.id, test_deck.id, front_content=f"card {i}")

        response = client.get("/api/v1/study/queue", params={"limit": 2}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [c["front_content"] for c in response.json()["cards"]] == ["card 0", "card 1"]

    def test_queue_limit_out_of_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/study/queue", params={"limit": 0}, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_queue_filtered_by_deck(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        other_deck = create_test_deck(db_session, test_user.id, title="Other")
        card = create_test_card(db_session, test_user.id, test_deck.id)
        create_test_card(db_session, test_user.id, other_deck.id)

        response = client.get(
            "/api/v1/study/queue", params={"deck_id": test_deck.id}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert [c["id"] for c in response.json()["cards"]] == [card.id]

    def test_queue_unknown_deck(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get(
            "/api/v1/study/queue", params={"deck_id": 99999}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_daily_new_card_allowance(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        first = create_test_card(db_session, test_user.id, test_deck.id, front_content="first")
        create_test_card(db_session, test_user.id, test_deck.id, front_content="second")
        create_test_card(db_session, test_user.id, test_deck.id, front_content="third")

        client.put(
            "/api/v1/study/preferences", json={"daily_new_cards": 2}, headers=auth_headers
        )
        client.post(f"/api/v1/cards/{first.id}/review", json={"grade": 4}, headers=auth_headers)

        response = client.get("/api/v1/study/queue", headers=auth_headers)

        data = response.json()
        assert data["new_cards_remaining_today"] == 1
        assert data["new_count"] == 1
        assert data["cards"][0]["front_content"] == "second"

    def test_empty_queue(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/v1/study/queue", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["cards"] == []


class TestStudyProfile:
    """Test suite for /study/profile and /study/preferences."""

    def test_default_profile(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/v1/study/profile", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total_reviews"] == 0
        assert data["current_streak"] == 0
        assert data["longest_streak"] == 0
        assert data["last_review_date"] is None
        assert data["daily_new_cards"] == 20
        assert data["daily_review_limit"] == 200

    def test_profile_after_review(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        client.post(f"/api/v1/cards/{test_card.id}/review", json={"grade": 3}, headers=auth_headers)
        client.post(f"/api/v1/cards/{test_card.id}/review", json={"grade": 3}, headers=auth_headers)

        data = client.get("/api/v1/study/profile", headers=auth_headers).json()

        assert data["total_reviews"] == 2
        assert data["current_streak"] == 1
        assert data["longest_streak"] == 1
        assert data["last_review_date"] is not None

    def test_update_preferences(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/v1/study/preferences",
            json={"daily_new_cards": 5, "daily_review_limit": 50},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["daily_new_cards"] == 5
        assert response.json()["daily_review_limit"] == 50

        profile = client.get("/api/v1/study/profile", headers=auth_headers).json()
        assert profile["daily_new_cards"] == 5
        assert profile["daily_review_limit"] == 50

    def test_update_preferences_requires_a_value(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.put("/api/v1/study/preferences", json={}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_preferences_out_of_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.put(
            "/api/v1/study/preferences", json={"daily_review_limit": 0}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
