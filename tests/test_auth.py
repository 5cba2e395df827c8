"""Tests for authentication endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from spacerep import models
from spacerep.infrastructure.identity.services.token_service import create_refresh_token
from tests.conftest import TEST_PASSWORD


class TestLogin:
    """Test suite for POST /auth/login."""

    def test_login_success(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": "test@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["expires_in"] == 15 * 60
        assert "refresh_token" in response.cookies

    def test_login_email_is_case_insensitive(
        self, client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": "  Test@Example.COM ", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": "test@example.com", "password": "WrongPass123"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"

    def test_login_unknown_email(self, client: TestClient, db_session: object) -> None:
        response = client.post(
            "/api/v1/auth/login",
            data={"username": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"


class TestRefresh:
    """Test suite for POST /auth/refresh."""

    def test_refresh_with_body_token(self, client: TestClient, test_user: models.User) -> None:
        response = client.post(
            "/api/v1/auth/refresh",
            json={"refresh_token": create_refresh_token(test_user.id)},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    def test_refresh_with_cookie(self, client: TestClient, test_user: models.User) -> None:
        client.cookies.set("refresh_token", create_refresh_token(test_user.id))
        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_200_OK

    def test_refresh_without_token(self, client: TestClient, test_user: models.User) -> None:
        response = client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Refresh token required"

    def test_refresh_with_invalid_token(self, client: TestClient, test_user: models.User) -> None:
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "not-a-jwt"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Invalid or expired refresh token"

    def test_access_token_is_not_a_refresh_token(
        self, client: TestClient, test_user: models.User, auth_headers: dict[str, str]
    ) -> None:
        access_token = auth_headers["Authorization"].removeprefix("Bearer ")
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": access_token})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_for_deleted_user(self, client: TestClient, db_session: object) -> None:
        response = client.post(
            "/api/v1/auth/refresh", json={"refresh_token": create_refresh_token(424242)}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestLogout:
    def test_logout(self, client: TestClient, db_session: object) -> None:
        response = client.post("/api/v1/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Logged out successfully"}


class TestProtectedEndpoints:
    def test_missing_token(self, client: TestClient, db_session: object) -> None:
        response = client.get("/api/v1/decks")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_token(self, client: TestClient, db_session: object) -> None:
        response = client.get("/api/v1/decks", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Could not validate credentials"

    def test_refresh_token_rejected_as_access_token(
        self, client: TestClient, test_user: models.User
    ) -> None:
        headers = {"Authorization": f"Bearer {create_refresh_token(test_user.id)}"}
        response = client.get("/api/v1/decks", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
