"""Use case for deck management."""

import structlog

from spacerep.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from spacerep.application.learning.use_cases.dtos.deck_dtos import DeckCardCounts, DeckWithCounts
from spacerep.domain.common.value_objects.ids import DeckId, UserId
from spacerep.domain.learning.entities.deck import Deck
from spacerep.exceptions import DeckNotFoundError, ValidationError
from spacerep.utils import utc_now

logger = structlog.get_logger(__name__)


class DeckUseCase:
    """Create, read, update and delete decks of a user."""

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        self.deck_repository = deck_repository

    def create_deck(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        is_public: bool = False,
    ) -> Deck:
        """
        Create a deck.

        Raises:
            DeckTitleAlreadyExistsError: If the user already has a deck with this title
            ValidationError: If the title is empty or too long
        """
        deck = Deck.create(
            user_id=UserId(user_id),
            title=title,
            description=description,
            is_public=is_public,
        )
        deck = self.deck_repository.save(deck)

        logger.info("deck_created", deck_id=deck.id.value, user_id=user_id)
        return deck

    def get_deck(self, deck_id: int, user_id: int) -> DeckWithCounts:
        """
        Get a deck with its card counts.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to another user
        """
        user_id_vo = UserId(user_id)
        deck = self.deck_repository.find_by_id(DeckId(deck_id), user_id_vo)
        if not deck:
            raise DeckNotFoundError(deck_id)

        counts = self.deck_repository.get_card_counts(user_id_vo, utc_now())
        return DeckWithCounts(deck=deck, counts=counts.get(deck_id, DeckCardCounts()))

    def list_decks(self, user_id: int) -> list[DeckWithCounts]:
        """All decks of the user ordered by title, with card counts."""
        user_id_vo = UserId(user_id)
        decks = self.deck_repository.find_all(user_id_vo)
        counts = self.deck_repository.get_card_counts(user_id_vo, utc_now())
        return [
            DeckWithCounts(deck=deck, counts=counts.get(deck.id.value, DeckCardCounts()))
            for deck in decks
        ]

    def update_deck(
        self,
        deck_id: int,
        user_id: int,
        title: str | None = None,
        description: str | None = None,
        is_public: bool | None = None,
    ) -> Deck:
        """
        Update a deck's title, description or visibility.

        Raises:
            DeckNotFoundError: If the deck does not exist
            ValidationError: If nothing to update was provided
            DeckTitleAlreadyExistsError: If the new title is taken
        """
        if title is None and description is None and is_public is None:
            raise ValidationError(
                "At least one of title, description or is_public must be provided"
            )

        deck = self.deck_repository.find_by_id(DeckId(deck_id), UserId(user_id))
        if not deck:
            raise DeckNotFoundError(deck_id)

        if title is not None:
            deck.rename(title)
        if description is not None:
            deck.update_description(description)
        if is_public is not None:
            deck.set_visibility(is_public)

        deck = self.deck_repository.save(deck)

        logger.info("deck_updated", deck_id=deck_id)
        return deck

    def delete_deck(self, deck_id: int, user_id: int) -> None:
        """
        Delete a deck together with its cards and their reviews.

        Raises:
            DeckNotFoundError: If the deck does not exist
        """
        if not self.deck_repository.delete(DeckId(deck_id), UserId(user_id)):
            raise DeckNotFoundError(deck_id)

        logger.info("deck_deleted", deck_id=deck_id, user_id=user_id)
