"""Protocol for Deck repository in learning context."""

from datetime import datetime
from typing import Protocol

from spacerep.application.learning.use_cases.dtos.deck_dtos import DeckCardCounts
from spacerep.domain.common.value_objects.ids import DeckId, UserId
from spacerep.domain.learning.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations."""

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """Find a deck owned by ``user_id``, or None."""
        ...

    def find_by_title(self, title: str, user_id: UserId) -> Deck | None:
        """Find a deck by its exact title, or None."""
        ...

    def find_all(self, user_id: UserId) -> list[Deck]:
        """All decks of a user ordered by title."""
        ...

    def get_card_counts(self, user_id: UserId, now: datetime) -> dict[int, DeckCardCounts]:
        """Total, due and new card counts keyed by deck id."""
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Create or update a deck.

        Raises:
            DeckTitleAlreadyExistsError: If the user already has a deck with the title
        """
        ...

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """Delete a deck and its cards. Returns False if not found."""
        ...
