"""API routes for study statistics."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from spacerep.application.learning.use_cases.statistics_use_case import (
    MAX_DAILY_RANGE,
    MAX_FORECAST_DAYS,
    StatisticsUseCase,
)
from spacerep.core import container
from spacerep.domain.common.exceptions import DomainError
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.identity.dependencies import CurrentUser
from spacerep.infrastructure.learning.schemas import (
    DailyStatisticsItem,
    DailyStatisticsResponse,
    DeckDistributionItem,
    DeckDistributionResponse,
    ForecastItem,
    ForecastResponse,
    StatisticsSummaryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/statistics", tags=["statistics"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("/summary", response_model=StatisticsSummaryResponse)
def get_summary(
    current_user: CurrentUser,
    use_case: StatisticsUseCase = Depends(inject_use_case(container.statistics_use_case)),
) -> StatisticsSummaryResponse:
    """Card counts, review totals, streaks and today's progress."""
    try:
        summary = use_case.get_summary(current_user.id.value)
        cards = summary.cards
        return StatisticsSummaryResponse(
            total_cards=cards.total_cards,
            new_cards=cards.new_cards,
            due_cards=cards.due_cards,
            mastered_cards=cards.mastered_cards,
            struggling_cards=cards.struggling_cards,
            average_a_factor=cards.average_a_factor,
            total_reviews=summary.total_reviews,
            current_streak=summary.current_streak,
            longest_streak=summary.longest_streak,
            total_study_time_minutes=summary.total_study_time_minutes,
            reviews_today=summary.reviews_today,
            accuracy_today=summary.accuracy_today,
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get statistics summary: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/daily", response_model=DailyStatisticsResponse)
def get_daily_statistics(
    current_user: CurrentUser,
    days: int = Query(7, ge=1, le=MAX_DAILY_RANGE, description="Number of days including today"),
    use_case: StatisticsUseCase = Depends(inject_use_case(container.statistics_use_case)),
) -> DailyStatisticsResponse:
    """
    Per-day review activity for progress charts.

    Days without reviews are included with zero counts.
    """
    try:
        entries = use_case.get_daily_statistics(current_user.id.value, days=days)
        return DailyStatisticsResponse(
            days=[
                DailyStatisticsItem(
                    date=entry.day,
                    reviews_completed=entry.reviews_completed,
                    new_cards_learned=entry.new_cards_learned,
                    study_time_minutes=entry.study_time_minutes,
                    average_response_time_ms=entry.average_response_time_ms,
                    accuracy_rate=entry.accuracy_rate,
                    retention_rate=entry.retention_rate,
                    grade_counts=entry.grade_counts,
                )
                for entry in entries
            ]
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get daily statistics: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/decks", response_model=DeckDistributionResponse)
def get_deck_distribution(
    current_user: CurrentUser,
    use_case: StatisticsUseCase = Depends(inject_use_case(container.statistics_use_case)),
) -> DeckDistributionResponse:
    try:
        entries = use_case.get_deck_distribution(current_user.id.value)
        return DeckDistributionResponse(
            decks=[
                DeckDistributionItem(
                    deck_id=entry.deck_id, title=entry.title, card_count=entry.card_count
                )
                for entry in entries
            ]
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck distribution: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/forecast", response_model=ForecastResponse)
def get_review_forecast(
    current_user: CurrentUser,
    days: int = Query(7, ge=1, le=MAX_FORECAST_DAYS, description="Number of days ahead"),
    use_case: StatisticsUseCase = Depends(inject_use_case(container.statistics_use_case)),
) -> ForecastResponse:
    """Number of reviews falling due on each upcoming day; overdue cards count for today."""
    try:
        forecast = use_case.get_review_forecast(current_user.id.value, days=days)
        return ForecastResponse(
            forecast=[ForecastItem(date=item.day, due_count=item.due_count) for item in forecast]
        )
    except (SpaceRepError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get review forecast: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
