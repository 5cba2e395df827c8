"""Tests for card API endpoints, including reviews."""

from datetime import timedelta

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import Session

from spacerep import models
from spacerep.utils import ensure_utc, utc_now
from tests.conftest import create_test_card, create_test_deck, reviewed_state


class TestGetCards:
    """Test suite for GET /cards and GET /cards/:id."""

    def test_get_cards_by_deck_title(
        self,
        client: TestClient,
        test_deck: models.Deck,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.get(
            "/api/v1/cards", params={"deck_title": test_deck.title}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        cards = response.json()["cards"]
        assert len(cards) == 1
        assert cards[0]["id"] == test_card.id

    def test_get_cards_unknown_deck_title(
        self, client: TestClient, test_deck: models.Deck, auth_headers: dict[str, str]
    ) -> None:
        response = client.get(
            "/api/v1/cards", params={"deck_title": "Missing"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == 'Deck "Missing" not found'

    def test_get_cards_empty_deck(
        self, client: TestClient, test_deck: models.Deck, auth_headers: dict[str, str]
    ) -> None:
        response = client.get(
            "/api/v1/cards", params={"deck_title": test_deck.title}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f'No cards found for deck "{test_deck.title}"'

    def test_get_card(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/v1/cards/{test_card.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["front_content"] == test_card.front_content

    def test_get_other_users_card(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        deck = create_test_deck(db_session, other_user.id)
        card = create_test_card(db_session, other_user.id, deck.id)

        response = client.get(f"/api/v1/cards/{card.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateCard:
    """Test suite for PUT /cards/:id."""

    def test_update_content_keeps_schedule(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        card = create_test_card(
            db_session,
            test_user.id,
            test_deck.id,
            **reviewed_state(utc_now() + timedelta(days=6), repetition_count=2),
        )

        response = client.put(
            f"/api/v1/cards/{card.id}",
            json={"front_content": "Updated question"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["card"]
        assert data["front_content"] == "Updated question"
        assert data["back_content"] == card.back_content
        assert data["repetition_count"] == 2
        assert data["interval_days"] == 6

    def test_move_card_to_other_deck(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        target = create_test_deck(db_session, test_user.id, title="Target")

        response = client.put(
            f"/api/v1/cards/{test_card.id}", json={"deck_id": target.id}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["card"]["deck_id"] == target.id

    def test_move_card_to_other_users_deck(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        foreign = create_test_deck(db_session, other_user.id, title="Foreign")

        response = client.put(
            f"/api/v1/cards/{test_card.id}", json={"deck_id": foreign.id}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_without_fields(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        response = client.put(f"/api/v1/cards/{test_card.id}", json={}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteCard:
    def test_delete_card(
        self,
        client: TestClient,
        db_session: Session,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        card_id = test_card.id

        response = client.delete(f"/api/v1/cards/{card_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        db_session.expire_all()
        assert db_session.get(models.Card, card_id) is None

    def test_delete_missing_card(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.delete("/api/v1/cards/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReviewCard:
    """Test suite for POST /cards/:id/review."""

    def test_first_review_of_new_card(
        self,
        client: TestClient,
        db_session: Session,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        before = utc_now()

        response = client.post(
            f"/api/v1/cards/{test_card.id}/review",
            json={"grade": 4, "response_time_ms": 3500},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        card = data["card"]
        assert card["repetition_count"] == 1
        assert card["interval_days"] == 1
        assert card["a_factor"] == 2.5
        assert card["is_new"] is False

        review = data["review"]
        assert review["grade"] == 4
        assert review["previous_interval"] is None
        assert review["new_interval"] == 1
        assert review["a_factor_before"] == 2.5
        assert review["response_time_ms"] == 3500
        assert review["optimal_factor_used"] is None

        stored = db_session.execute(
            select(models.Card).where(models.Card.id == test_card.id)
        ).scalar_one()
        db_session.refresh(stored)
        assert ensure_utc(stored.next_review_date) >= before + timedelta(days=1)
        assert len(stored.review_history) == 1

    def test_review_sequence_uses_fixed_then_growing_intervals(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        intervals = []
        for _ in range(3):
            response = client.post(
                f"/api/v1/cards/{test_card.id}/review", json={"grade": 4}, headers=auth_headers
            )
            assert response.status_code == status.HTTP_200_OK
            intervals.append(response.json()["card"]["interval_days"])

        assert intervals[:2] == [1, 6]
        assert intervals[2] == 15

    def test_third_review_updates_optimal_factor_matrix(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        card = create_test_card(
            db_session, test_user.id, test_deck.id, **reviewed_state(utc_now())
        )

        response = client.post(
            f"/api/v1/cards/{card.id}/review", json={"grade": 5}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["review"]["optimal_factor_used"] == 2.5

        cells = db_session.execute(select(models.OptimalFactor)).scalars().all()
        assert len(cells) == 1
        assert cells[0].user_id == test_user.id
        assert cells[0].repetition_number == 3
        assert cells[0].usage_count == 1

    def test_failed_review_counts_lapse(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        card = create_test_card(
            db_session, test_user.id, test_deck.id, **reviewed_state(utc_now())
        )

        response = client.post(
            f"/api/v1/cards/{card.id}/review", json={"grade": 1}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["card"]
        assert data["repetition_count"] == 0
        assert data["interval_days"] == 1
        assert data["lapses_count"] == 1
        assert data["a_factor"] == pytest.approx(1.96)

    @pytest.mark.parametrize("grade", [0, 6])
    def test_review_invalid_grade(
        self,
        client: TestClient,
        test_card: models.Card,
        auth_headers: dict[str, str],
        grade: int,
    ) -> None:
        response = client.post(
            f"/api/v1/cards/{test_card.id}/review", json={"grade": grade}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    @pytest.mark.parametrize("response_time_ms", [-1, 3_600_001, 3_000_000_000, 10**20])
    def test_review_response_time_out_of_range(
        self,
        client: TestClient,
        db_session: Session,
        test_card: models.Card,
        auth_headers: dict[str, str],
        response_time_ms: int,
    ) -> None:
        response = client.post(
            f"/api/v1/cards/{test_card.id}/review",
            json={"grade": 4, "response_time_ms": response_time_ms},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert db_session.execute(select(models.Review)).first() is None

    def test_review_response_time_upper_bound_accepted(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            f"/api/v1/cards/{test_card.id}/review",
            json={"grade": 4, "response_time_ms": 3_600_000},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK

    def test_review_missing_card(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/cards/99999/review", json={"grade": 3}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_review_updates_profile_and_daily_statistics(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_card: models.Card,
        auth_headers: dict[str, str],
    ) -> None:
        client.post(
            f"/api/v1/cards/{test_card.id}/review",
            json={"grade": 2, "response_time_ms": 4000},
            headers=auth_headers,
        )

        db_session.expire_all()
        user = db_session.get(models.User, test_user.id)
        assert user is not None
        assert user.total_reviews == 1
        assert user.current_streak == 1
        assert user.total_study_time_seconds == 4

        row = db_session.execute(select(models.UserStatistics)).scalar_one()
        assert row.day == utc_now().date()
        assert row.reviews_completed == 1
        assert row.new_cards_learned == 1
        assert row.grade_2_count == 1
        assert row.accuracy_rate == 0.0

    def test_get_card_reviews_newest_first(
        self, client: TestClient, test_card: models.Card, auth_headers: dict[str, str]
    ) -> None:
        for grade in (3, 5):
            client.post(
                f"/api/v1/cards/{test_card.id}/review", json={"grade": grade}, headers=auth_headers
            )

        response = client.get(f"/api/v1/cards/{test_card.id}/reviews", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert [r["grade"] for r in response.json()["reviews"]] == [5, 3]


class TestResetCard:
    def test_reset_card(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        test_deck: models.Deck,
        auth_headers: dict[str, str],
    ) -> None:
        card = create_test_card(
            db_session,
            test_user.id,
            test_deck.id,
            **reviewed_state(utc_now() + timedelta(days=30), interval_days=30, lapses_count=2),
        )

        response = client.post(f"/api/v1/cards/{card.id}/reset", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["card"]
        assert data["is_new"] is True
        assert data["repetition_count"] == 0
        assert data["interval_days"] == 1
        assert data["lapses_count"] == 0
        assert data["a_factor"] == 2.5
