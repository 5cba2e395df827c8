"""Tests for user account endpoints."""

from unittest.mock import patch

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from spacerep import models
from tests.conftest import TEST_PASSWORD, create_test_card, create_test_deck


class TestRegister:
    """Test suite for POST /users/register."""

    def test_register_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "New.User@Example.com", "password": "Secret123"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["access_token"]
        assert data["refresh_token"]

        user = db_session.execute(
            select(models.User).where(models.User.email == "new.user@example.com")
        ).scalar_one()
        assert user.hashed_password != "Secret123"

    def test_register_duplicate_email(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "test@example.com", "password": "Secret123"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

    def test_register_weak_password(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "weak@example.com", "password": "alllowercase1"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_register_invalid_email(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/users/register",
            json={"email": "not-an-email", "password": "Secret123"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_register_disabled(self, client: TestClient, db_session: Session) -> None:
        with patch(
            "spacerep.application.identity.use_cases.register_user_use_case."
            "is_user_registrations_enabled",
            return_value=False,
        ):
            response = client.post(
                "/api/v1/users/register",
                json={"email": "new@example.com", "password": "Secret123"},
            )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestMe:
    """Test suite for /users/me."""

    def test_get_me(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/users/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": test_user.id, "email": "test@example.com"}

    def test_update_email(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/users/me", json={"email": "renamed@example.com"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["email"] == "renamed@example.com"

    def test_update_email_taken(
        self,
        client: TestClient,
        other_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.post(
            "/api/v1/users/me", json={"email": "other@example.com"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

    def test_change_password(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/users/me",
            json={"current_password": TEST_PASSWORD, "new_password": "Changed456"},
            headers=auth_headers,
        )
        assert response.status_code == status.HTTP_200_OK

        login = client.post(
            "/api/v1/auth/login",
            data={"username": "test@example.com", "password": "Changed456"},
        )
        assert login.status_code == status.HTTP_200_OK

    def test_change_password_wrong_current(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/users/me",
            json={"current_password": "WrongPass1", "new_password": "Changed456"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Current password is incorrect"

    def test_change_password_requires_current(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/users/me", json={"new_password": "Changed456"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteAccount:
    """Test suite for DELETE /users/me."""

    def test_delete_account_cascades(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        deck = create_test_deck(db_session, test_user.id)
        create_test_card(db_session, test_user.id, deck.id)
        user_id = test_user.id

        response = client.request(
            "DELETE", "/api/v1/users/me", json={"password": TEST_PASSWORD}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Account deleted successfully"

        db_session.expire_all()
        assert db_session.get(models.User, user_id) is None
        assert db_session.execute(select(func.count(models.Deck.id))).scalar() == 0
        assert db_session.execute(select(func.count(models.Card.id))).scalar() == 0

    def test_delete_account_wrong_password(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.request(
            "DELETE", "/api/v1/users/me", json={"password": "WrongPass1"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Password is incorrect"
