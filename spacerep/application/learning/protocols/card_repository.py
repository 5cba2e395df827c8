"""Protocol for Card repository in learning context."""

from datetime import date, datetime
from typing import Protocol

from spacerep.application.learning.use_cases.dtos.statistics_dtos import CardCounts
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import Card


class CardRepositoryProtocol(Protocol):
    """Protocol for Card repository operations."""

    def find_by_id(self, card_id: CardId, user_id: UserId) -> Card | None:
        """
        Find a card by ID with user ownership check.

        Returns:
            Card entity if found and owned by user, None otherwise
        """
        ...

    def find_by_deck(self, deck_id: DeckId, user_id: UserId) -> list[Card]:
        """Cards of a deck, oldest first."""
        ...

    def find_due_reviews(
        self, user_id: UserId, now: datetime, limit: int, deck_id: DeckId | None = None
    ) -> list[Card]:
        """
        Previously reviewed cards whose next review is at or before ``now``.

        Ordered by next_review_date, then id.
        """
        ...

    def find_new(self, user_id: UserId, limit: int, deck_id: DeckId | None = None) -> list[Card]:
        """Never reviewed cards, oldest first."""
        ...

    def count_by_deck(self, deck_id: DeckId, user_id: UserId) -> int: ...

    def get_counts(self, user_id: UserId, now: datetime) -> CardCounts:
        """Aggregate card counts for statistics."""
        ...

    def count_due_by_day(self, user_id: UserId, start: date, days: int) -> dict[date, int]:
        """
        Cards due on each day of ``[start, start + days)``.

        Cards already overdue are counted on ``start``.
        """
        ...

    def save(self, card: Card) -> Card: ...

    def save_all(self, cards: list[Card]) -> list[Card]: ...

    def delete(self, card_id: CardId, user_id: UserId) -> bool: ...

    def delete_by_deck(self, deck_id: DeckId, user_id: UserId) -> int:
        """Delete every card of a deck and return how many were removed."""
        ...
