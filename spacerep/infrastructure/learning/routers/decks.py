"""API routes for deck management and the cards inside a deck."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from spacerep.application.learning.use_cases.card_use_case import CardUseCase
from spacerep.application.learning.use_cases.deck_use_case import DeckUseCase
from spacerep.application.learning.use_cases.dtos.card_dtos import CardContent
from spacerep.core import container
from spacerep.domain.common.exceptions import DomainError
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.common.schemas import SuccessResponse
from spacerep.infrastructure.identity.dependencies import CurrentUser
from spacerep.infrastructure.learning.schemas import (
    CardBatchCreateRequest,
    CardCreateRequest,
    CardResponse,
    CardsCreatedResponse,
    CardsDeletedResponse,
    CardsListResponse,
    Deck,
    DeckCreateRequest,
    DeckResponse,
    DecksListResponse,
    DeckUpdateRequest,
    card_to_schema,
    deck_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckResponse:
    """
    Create a deck.

    Titles are unique per user; a duplicate title returns 409.
    """
    try:
        deck = use_case.create_deck(
            user_id=current_user.id.value,
            title=request.title,
            description=request.description,
            is_public=request.is_public,
        )
        return DeckResponse(
            success=True, message="Deck created successfully", deck=deck_to_schema(deck)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("", response_model=DecksListResponse)
def list_decks(
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DecksListResponse:
    """Get all decks of the current user with total, due and new card counts."""
    try:
        decks = use_case.list_decks(current_user.id.value)
        return DecksListResponse(decks=[deck_to_schema(d.deck, d.counts) for d in decks])
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{deck_id}", response_model=Deck)
def get_deck(
    deck_id: int,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> Deck:
    try:
        result = use_case.get_deck(deck_id, current_user.id.value)
        return deck_to_schema(result.deck, result.counts)
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{deck_id}", response_model=DeckResponse)
def update_deck(
    deck_id: int,
    request: DeckUpdateRequest,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckResponse:
    """Update a deck's title, description and/or visibility."""
    try:
        deck = use_case.update_deck(
            deck_id=deck_id,
            user_id=current_user.id.value,
            title=request.title,
            description=request.description,
            is_public=request.is_public,
        )
        return DeckResponse(
            success=True, message="Deck updated successfully", deck=deck_to_schema(deck)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{deck_id}", response_model=SuccessResponse)
def delete_deck(
    deck_id: int,
    current_user: CurrentUser,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> SuccessResponse:
    """Delete a deck together with all of its cards and their review history."""
    try:
        use_case.delete_deck(deck_id, current_user.id.value)
        return SuccessResponse(success=True, message="Deck deleted successfully")
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{deck_id}/cards", response_model=CardResponse, status_code=status.HTTP_201_CREATED
)
def create_card(
    deck_id: int,
    request: CardCreateRequest,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardResponse:
    try:
        card = use_case.create_card(
            deck_id=deck_id,
            user_id=current_user.id.value,
            front_content=request.front_content,
            back_content=request.back_content,
            source_type=request.source_type,
        )
        return CardResponse(
            success=True, message="Card created successfully", card=card_to_schema(card)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create card in deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{deck_id}/cards/batch",
    response_model=CardsCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_cards(
    deck_id: int,
    request: CardBatchCreateRequest,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardsCreatedResponse:
    """
    Create several cards at once.

    Used to accept AI flashcard suggestions (with source_type "ai").
    """
    try:
        cards = use_case.create_cards(
            deck_id=deck_id,
            user_id=current_user.id.value,
            items=[
                CardContent(front_content=c.front_content, back_content=c.back_content)
                for c in request.cards
            ],
            source_type=request.source_type,
        )
        return CardsCreatedResponse(
            success=True,
            message=f"{len(cards)} cards created successfully",
            cards=[card_to_schema(card) for card in cards],
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create cards in deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{deck_id}/cards", response_model=CardsListResponse)
def get_deck_cards(
    deck_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardsListResponse:
    try:
        cards = use_case.get_cards_by_deck(deck_id, current_user.id.value)
        return CardsListResponse(cards=[card_to_schema(card) for card in cards])
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get cards of deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{deck_id}/cards", response_model=CardsDeletedResponse)
def delete_deck_cards(
    deck_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardsDeletedResponse:
    """Delete every card in a deck, keeping the deck itself."""
    try:
        result = use_case.delete_all_cards(deck_id, current_user.id.value)
        return CardsDeletedResponse(
            success=True, message=result.message, deleted_count=result.deleted_count
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete cards of deck {deck_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
