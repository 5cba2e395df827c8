"""Use case for card management."""

import structlog

from spacerep.application.learning.protocols.card_repository import CardRepositoryProtocol
from spacerep.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from spacerep.application.learning.use_cases.dtos.card_dtos import (
    CardContent,
    DeleteAllCardsResult,
)
from spacerep.application.learning.use_cases.exceptions import CardNotFoundError
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import Card
from spacerep.domain.learning.entities.deck import Deck
from spacerep.exceptions import DeckNotFoundError, NotFoundError, ValidationError
from spacerep.utils import utc_now

logger = structlog.get_logger(__name__)

MAX_BATCH_SIZE = 100


class CardUseCase:
    """Card CRUD within the decks of a user."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.card_repository = card_repository
        self.deck_repository = deck_repository

    def _get_deck(self, deck_id: int, user_id: int) -> Deck:
        deck = self.deck_repository.find_by_id(DeckId(deck_id), UserId(user_id))
        if not deck:
            raise DeckNotFoundError(deck_id)
        return deck

    def create_card(
        self,
        deck_id: int,
        user_id: int,
        front_content: str,
        back_content: str,
        source_type: str = "manual",
    ) -> Card:
        """
        Create a card in a deck.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to another user
            ValidationError: If front or back content is empty
        """
        deck = self._get_deck(deck_id, user_id)

        card = Card.create(
            user_id=UserId(user_id),
            deck_id=deck.id,
            front_content=front_content,
            back_content=back_content,
            source_type=source_type,
        )
        card = self.card_repository.save(card)

        logger.info("card_created", card_id=card.id.value, deck_id=deck_id)
        return card

    def create_cards(
        self,
        deck_id: int,
        user_id: int,
        items: list[CardContent],
        source_type: str = "manual",
    ) -> list[Card]:
        """
        Create several cards in one deck, e.g. accepted AI suggestions.

        Raises:
            DeckNotFoundError: If the deck does not exist
            ValidationError: If the batch is empty, too large or has empty content
        """
        if not items:
            raise ValidationError("At least one card must be provided")
        if len(items) > MAX_BATCH_SIZE:
            raise ValidationError(f"Cannot create more than {MAX_BATCH_SIZE} cards at once")

        deck = self._get_deck(deck_id, user_id)
        now = utc_now()
        cards = [
            Card.create(
                user_id=UserId(user_id),
                deck_id=deck.id,
                front_content=item.front_content,
                back_content=item.back_content,
                source_type=source_type,
                now=now,
            )
            for item in items
        ]
        cards = self.card_repository.save_all(cards)

        logger.info(
            "cards_created", deck_id=deck_id, count=len(cards), source_type=source_type
        )
        return cards

    def get_card(self, card_id: int, user_id: int) -> Card:
        """
        Get a single card.

        Raises:
            CardNotFoundError: If the card does not exist or belongs to another user
        """
        card = self.card_repository.find_by_id(CardId(card_id), UserId(user_id))
        if not card:
            raise CardNotFoundError(card_id)
        return card

    def get_cards_by_deck(self, deck_id: int, user_id: int) -> list[Card]:
        """
        All cards of a deck.

        Raises:
            DeckNotFoundError: If the deck does not exist
        """
        deck = self._get_deck(deck_id, user_id)
        return self.card_repository.find_by_deck(deck.id, UserId(user_id))

    def get_cards_by_deck_title(self, title: str, user_id: int) -> list[Card]:
        """
        All cards of the deck with the given title.

        Raises:
            NotFoundError: If there is no such deck or it has no cards
        """
        user_id_vo = UserId(user_id)
        deck = self.deck_repository.find_by_title(title.strip(), user_id_vo)
        if not deck:
            raise DeckNotFoundError(message=f'Deck "{title}" not found')

        cards = self.card_repository.find_by_deck(deck.id, user_id_vo)
        if not cards:
            raise NotFoundError(f'No cards found for deck "{title}"')
        return cards

    def update_card(
        self,
        card_id: int,
        user_id: int,
        front_content: str | None = None,
        back_content: str | None = None,
        deck_id: int | None = None,
    ) -> Card:
        """
        Update a card's content or move it to another deck.

        Scheduling state is kept when content changes.

        Raises:
            CardNotFoundError: If the card does not exist
            DeckNotFoundError: If the target deck does not exist
            ValidationError: If no field was provided
        """
        if front_content is None and back_content is None and deck_id is None:
            raise ValidationError(
                "At least one of front_content, back_content or deck_id must be provided"
            )

        card = self.get_card(card_id, user_id)

        card.update_content(front_content, back_content)
        if deck_id is not None and deck_id != card.deck_id.value:
            card.move_to_deck(self._get_deck(deck_id, user_id).id)

        card = self.card_repository.save(card)

        logger.info("card_updated", card_id=card_id)
        return card

    def reset_card(self, card_id: int, user_id: int) -> Card:
        """
        Reset a card's scheduling progress so it is studied as new again.

        Raises:
            CardNotFoundError: If the card does not exist
        """
        card = self.get_card(card_id, user_id)
        card.reset_progress(utc_now())
        card = self.card_repository.save(card)

        logger.info("card_reset", card_id=card_id)
        return card

    def delete_card(self, card_id: int, user_id: int) -> None:
        """
        Delete a card and its reviews.

        Raises:
            CardNotFoundError: If the card does not exist
        """
        if not self.card_repository.delete(CardId(card_id), UserId(user_id)):
            raise CardNotFoundError(card_id)

        logger.info("card_deleted", card_id=card_id)

    def delete_all_cards(self, deck_id: int, user_id: int) -> DeleteAllCardsResult:
        """
        Delete every card in a deck.

        Raises:
            DeckNotFoundError: If the deck does not exist
        """
        deck = self._get_deck(deck_id, user_id)
        user_id_vo = UserId(user_id)

        if self.card_repository.count_by_deck(deck.id, user_id_vo) == 0:
            return DeleteAllCardsResult(deleted_count=0, message="Deck is already empty")

        deleted = self.card_repository.delete_by_deck(deck.id, user_id_vo)

        logger.info("deck_cards_deleted", deck_id=deck_id, deleted_count=deleted)
        return DeleteAllCardsResult(
            deleted_count=deleted, message="All cards deleted successfully"
        )
