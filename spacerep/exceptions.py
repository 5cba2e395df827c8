"""Custom exception hierarchy for the spacerep application."""

from fastapi import HTTPException
from starlette import status


class SpaceRepError(Exception):
    """Base exception for all spacerep errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(SpaceRepError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class DeckNotFoundError(NotFoundError):
    """Deck not found error."""

    def __init__(self, deck_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with deck ID or custom message."""
        self.deck_id = deck_id
        if message:
            super().__init__(message)
        elif deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class ValidationError(SpaceRepError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code by default."""
        super().__init__(message, status_code=status_code)


class ServiceError(SpaceRepError):
    """Service layer error."""


class FlashcardGenerationError(ServiceError):
    """Every configured AI model failed to produce flashcards."""

    def __init__(self, reason: str, model_errors: list[str] | None = None) -> None:
        """Initialize with the failure reason and per-model errors."""
        self.reason = reason
        self.model_errors = model_errors or []
        super().__init__(f"Flashcard generation failed: {reason}", status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
