"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to spacerep API"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    """Test API v1 root endpoint."""
    response = client.get("/api/v1/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "spacerep API v1"
    assert data["version"] == "0.1.0"
    assert data["docs"] == "/docs"


def test_settings_endpoint(client: TestClient) -> None:
    """Test public settings expose feature flags without authentication."""
    response = client.get("/api/v1/settings")
    assert response.status_code == 200
    data = response.json()
    assert data["feature_flags"]["ai"] is False
    assert data["feature_flags"]["user_registrations"] is True
    assert data["max_generation_text_length"] == 50_000
