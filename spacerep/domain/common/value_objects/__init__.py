"""Common value objects shared across all domain modules."""

from .ids import CardId, DeckId, ReviewId, UserId

__all__ = [
    "CardId",
    "DeckId",
    "ReviewId",
    "UserId",
]
