"""AI-powered flashcard suggestions for free text."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status

from spacerep.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from spacerep.core import container
from spacerep.dependencies import require_ai_enabled
from spacerep.domain.common.exceptions import DomainError
from spacerep.domain.identity.entities.user import User
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.common.rate_limit import SUGGESTIONS_RATE_LIMIT, limiter
from spacerep.infrastructure.identity.dependencies import get_current_user
from spacerep.infrastructure.learning.schemas import (
    FlashcardSuggestionItem,
    FlashcardSuggestionsRequest,
    FlashcardSuggestionsResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post(
    "/suggestions",
    response_model=FlashcardSuggestionsResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(SUGGESTIONS_RATE_LIMIT)  # type: ignore[misc]
@require_ai_enabled
async def generate_flashcard_suggestions(
    request: Request,
    body: FlashcardSuggestionsRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GenerateFlashcardsUseCase = Depends(
        inject_use_case(container.generate_flashcards_use_case)
    ),
) -> FlashcardSuggestionsResponse:
    """
    Generate flashcard suggestions from study material.

    Nothing is stored; accept suggestions through POST /decks/{deck_id}/cards/batch.
    Returns 503 if every configured AI model fails.
    """
    try:
        suggestions = await use_case.generate(body.text)
        return FlashcardSuggestionsResponse(
            suggestions=[
                FlashcardSuggestionItem(question=s.question, answer=s.answer)
                for s in suggestions
            ]
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_flashcard_suggestions",
            user_id=current_user.id.value,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
