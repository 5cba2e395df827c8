"""API routes for study sessions and study preferences."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spacerep.application.learning.use_cases.study_use_case import MAX_QUEUE_SIZE, StudyUseCase
from spacerep.core import container
from spacerep.domain.common.exceptions import DomainError
from spacerep.domain.learning.entities.study_profile import StudyProfile
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.identity.dependencies import CurrentUser
from spacerep.infrastructure.learning.schemas import (
    StudyPreferencesUpdateRequest,
    StudyProfileResponse,
    StudyQueueResponse,
    card_to_schema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study", tags=["study"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def _profile_response(profile: StudyProfile) -> StudyProfileResponse:
    return StudyProfileResponse(
        total_reviews=profile.total_reviews,
        current_streak=profile.current_streak,
        longest_streak=profile.longest_streak,
        last_review_date=profile.last_review_date,
        total_study_time_seconds=profile.total_study_time_seconds,
        daily_new_cards=profile.daily_new_cards,
        daily_review_limit=profile.daily_review_limit,
    )


@router.get("/queue", response_model=StudyQueueResponse)
def get_study_queue(
    current_user: CurrentUser,
    deck_id: int | None = Query(None, description="Only study cards of this deck"),
    limit: int = Query(20, ge=1, le=MAX_QUEUE_SIZE, description="Maximum number of cards"),
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyQueueResponse:
    """
    Get the cards to study now.

    Due reviews come first, most overdue first, followed by new cards.
    Both are limited by what is left of today's allowance.
    """
    try:
        queue = use_case.get_study_queue(current_user.id.value, deck_id=deck_id, limit=limit)
        return StudyQueueResponse(
            cards=[card_to_schema(card) for card in queue.cards],
            review_count=len(queue.review_cards),
            new_count=len(queue.new_cards),
            reviews_remaining_today=queue.reviews_remaining_today,
            new_cards_remaining_today=queue.new_cards_remaining_today,
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to build study queue: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/profile", response_model=StudyProfileResponse)
def get_study_profile(
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyProfileResponse:
    """Get review totals, streaks and daily allowances of the current user."""
    try:
        return _profile_response(use_case.get_profile(current_user.id.value))
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get study profile: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/preferences", response_model=StudyProfileResponse)
def update_study_preferences(
    request: StudyPreferencesUpdateRequest,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyProfileResponse:
    try:
        profile = use_case.update_preferences(
            current_user.id.value,
            daily_new_cards=request.daily_new_cards,
            daily_review_limit=request.daily_review_limit,
        )
        return _profile_response(profile)
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update study preferences: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
