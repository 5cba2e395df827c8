"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("COOKIE_SECURE", "false")

from collections.abc import Generator  # noqa: E402
from datetime import datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from spacerep import models  # noqa: E402
from spacerep.database import Base, create_app_engine, get_db  # noqa: E402
from spacerep.infrastructure.identity.services.password_service import hash_password  # noqa: E402
from spacerep.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from spacerep.main import app  # noqa: E402

TEST_PASSWORD = "TestPass123"

# In-memory SQLite shared across connections, with foreign keys enabled
test_engine = create_app_engine("sqlite://")

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


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
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_user(db_session: Session, email: str, password: str = TEST_PASSWORD) -> models.User:
    user = models.User(email=email, hashed_password=hash_password(password))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_deck(
    db_session: Session, user_id: int, title: str = "Test Deck", description: str | None = None
) -> models.Deck:
    deck = models.Deck(user_id=user_id, title=title, description=description)
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


def create_test_card(
    db_session: Session,
    user_id: int,
    deck_id: int,
    front_content: str = "What is spaced repetition?",
    back_content: str = "Reviewing at increasing intervals",
    **state: Any,  # noqa: ANN401
) -> models.Card:
    """Create a card; ``state`` overrides scheduling columns."""
    card = models.Card(
        user_id=user_id,
        deck_id=deck_id,
        front_content=front_content,
        back_content=back_content,
        **state,
    )
    db_session.add(card)
    db_session.commit()
    db_session.refresh(card)
    return card


def auth_headers_for(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return create_test_user(db_session, "test@example.com")


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    return create_test_user(db_session, "other@example.com")


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    return auth_headers_for(test_user)


@pytest.fixture
def test_deck(db_session: Session, test_user: models.User) -> models.Deck:
    return create_test_deck(db_session, test_user.id)


@pytest.fixture
def test_card(db_session: Session, test_user: models.User, test_deck: models.Deck) -> models.Card:
    return create_test_card(db_session, test_user.id, test_deck.id)


def reviewed_state(next_review_date: datetime, **overrides: Any) -> dict[str, Any]:  # noqa: ANN401
    """Scheduling columns of a card that has been reviewed before."""
    state: dict[str, Any] = {
        "repetition_count": 2,
        "interval_days": 6,
        "a_factor": 2.5,
        "last_reviewed_at": next_review_date - timedelta(days=6),
        "next_review_date": next_review_date,
    }
    state.update(overrides)
    return state
