"""Pydantic schemas for study sessions and preferences."""

from datetime import datetime

from pydantic import BaseModel, Field

from spacerep.infrastructure.learning.schemas.card_schemas import Card


class StudyQueueResponse(BaseModel):
    """Cards to study now: due reviews first, then new cards."""

    cards: list[Card] = Field(..., description="Cards in study order")
    review_count: int = Field(..., description="Due reviews in the queue")
    new_count: int = Field(..., description="New cards in the queue")
    reviews_remaining_today: int
    new_cards_remaining_today: int


class StudyProfileResponse(BaseModel):
    total_reviews: int
    current_streak: int
    longest_streak: int
    last_review_date: datetime | None
    total_study_time_seconds: int
    daily_new_cards: int
    daily_review_limit: int


class StudyPreferencesUpdateRequest(BaseModel):
    """Schema for changing the daily study allowances."""

    daily_new_cards: int | None = Field(None, ge=0, le=1000, description="New cards per day")
    daily_review_limit: int | None = Field(
        None, ge=1, le=10000, description="Maximum reviews per day"
    )
