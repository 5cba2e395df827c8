"""API routes for individual cards and their reviews."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spacerep.application.learning.use_cases.card_use_case import CardUseCase
from spacerep.application.learning.use_cases.study_use_case import StudyUseCase
from spacerep.core import container
from spacerep.domain.common.exceptions import DomainError
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.common.schemas import SuccessResponse
from spacerep.infrastructure.identity.dependencies import CurrentUser
from spacerep.infrastructure.learning.schemas import (
    Card,
    CardResponse,
    CardsListResponse,
    CardUpdateRequest,
    ReviewRequest,
    ReviewResponse,
    ReviewsListResponse,
    card_to_schema,
    review_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=CardsListResponse)
def get_cards_by_deck_title(
    current_user: CurrentUser,
    deck_title: str = Query(..., min_length=1, description="Title of the deck"),
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardsListResponse:
    """
    Get the cards of the deck with the given title.

    Returns 404 if there is no such deck or it has no cards.
    """
    try:
        cards = use_case.get_cards_by_deck_title(deck_title, current_user.id.value)
        return CardsListResponse(cards=[card_to_schema(card) for card in cards])
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get cards of deck '{deck_title}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{card_id}", response_model=Card)
def get_card(
    card_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> Card:
    try:
        return card_to_schema(use_case.get_card(card_id, current_user.id.value))
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{card_id}", response_model=CardResponse)
def update_card(
    card_id: int,
    request: CardUpdateRequest,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardResponse:
    """
    Update a card's content or move it to another deck.

    Its scheduling state is kept.
    """
    try:
        card = use_case.update_card(
            card_id=card_id,
            user_id=current_user.id.value,
            front_content=request.front_content,
            back_content=request.back_content,
            deck_id=request.deck_id,
        )
        return CardResponse(
            success=True, message="Card updated successfully", card=card_to_schema(card)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{card_id}", response_model=SuccessResponse)
def delete_card(
    card_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> SuccessResponse:
    try:
        use_case.delete_card(card_id, current_user.id.value)
        return SuccessResponse(success=True, message="Card deleted successfully")
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("/{card_id}/review", response_model=ReviewResponse)
def review_card(
    card_id: int,
    request: ReviewRequest,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> ReviewResponse:
    """
    Grade a card from 1 (forgot) to 5 (perfect) and reschedule it.

    Grades of 3 and above count as a successful recall.
    """
    try:
        outcome = use_case.review_card(
            card_id=card_id,
            user_id=current_user.id.value,
            grade=request.grade,
            response_time_ms=request.response_time_ms,
        )
        return ReviewResponse(
            card=card_to_schema(outcome.card), review=review_to_schema(outcome.review)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to review card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{card_id}/reviews", response_model=ReviewsListResponse)
def get_card_reviews(
    card_id: int,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> ReviewsListResponse:
    try:
        reviews = use_case.get_card_reviews(card_id, current_user.id.value)
        return ReviewsListResponse(reviews=[review_to_schema(r) for r in reviews])
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get reviews of card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("/{card_id}/reset", response_model=CardResponse)
def reset_card(
    card_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardResponse:
    """Forget a card's progress so it is studied as a new card again."""
    try:
        card = use_case.reset_card(card_id, current_user.id.value)
        return CardResponse(
            success=True, message="Card progress reset successfully", card=card_to_schema(card)
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to reset card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
