"""Pydantic schemas for Card API request/response validation."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from spacerep.domain.learning.entities.card import Card as CardEntity
from spacerep.domain.learning.entities.review import Review as ReviewEntity
from spacerep.domain.learning.value_objects.scheduling import MAX_RESPONSE_TIME_MS

SourceType = Literal["manual", "ai", "import"]


class CardBase(BaseModel):
    """Base schema for Card."""

    front_content: str = Field(..., min_length=1, description="Prompt shown first")
    back_content: str = Field(..., min_length=1, description="Answer revealed second")


class CardCreateRequest(CardBase):
    """Schema for creating a card."""

    source_type: SourceType = Field("manual", description="Where the card came from")


class CardBatchCreateRequest(BaseModel):
    """Schema for creating several cards at once, e.g. accepted AI suggestions."""

    cards: list[CardBase] = Field(..., min_length=1, max_length=100)
    source_type: SourceType = Field("manual", description="Where the cards came from")


class CardUpdateRequest(BaseModel):
    """Schema for updating a card."""

    front_content: str | None = Field(None, min_length=1, description="New front text")
    back_content: str | None = Field(None, min_length=1, description="New back text")
    deck_id: int | None = Field(None, description="Move the card to this deck")


class Card(CardBase):
    """Schema for Card response including scheduling state."""

    id: int
    user_id: int
    deck_id: int
    source_type: str
    a_factor: float
    repetition_count: int
    interval_days: int
    lapses_count: int
    next_review_date: datetime
    last_reviewed_at: datetime | None
    is_new: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CardResponse(BaseModel):
    """Schema for card create/update responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    card: Card = Field(..., description="The card")


class CardsListResponse(BaseModel):
    """Schema for list of cards response."""

    cards: list[Card] = Field(..., description="List of cards")


class CardsCreatedResponse(BaseModel):
    success: bool
    message: str
    cards: list[Card]


class CardsDeletedResponse(BaseModel):
    success: bool
    message: str
    deleted_count: int


class ReviewRequest(BaseModel):
    """Schema for grading a card."""

    grade: int = Field(..., ge=1, le=5, description="Recall quality, 1 (forgot) to 5 (perfect)")
    response_time_ms: int | None = Field(
        None,
        ge=0,
        le=MAX_RESPONSE_TIME_MS,
        description="Time taken to answer in milliseconds",
    )


class Review(BaseModel):
    """Schema for a stored review."""

    id: int
    card_id: int
    review_date: datetime
    grade: int
    response_time_ms: int | None
    previous_interval: int | None
    new_interval: int
    a_factor_before: float
    a_factor_after: float
    optimal_factor_used: float | None


class ReviewResponse(BaseModel):
    """Schema for review response: the rescheduled card and the review record."""

    card: Card
    review: Review


class ReviewsListResponse(BaseModel):
    reviews: list[Review] = Field(..., description="Reviews, newest first")


def card_to_schema(card: CardEntity) -> Card:
    """Build the API representation of a card entity."""
    return Card(
        id=card.id.value,
        user_id=card.user_id.value,
        deck_id=card.deck_id.value,
        front_content=card.front_content,
        back_content=card.back_content,
        source_type=card.source_type,
        a_factor=card.a_factor,
        repetition_count=card.repetition_count,
        interval_days=card.interval_days,
        lapses_count=card.lapses_count,
        next_review_date=card.next_review_date,
        last_reviewed_at=card.last_reviewed_at,
        is_new=card.is_new,
        created_at=card.created_at,
        updated_at=card.updated_at,
    )


def review_to_schema(review: ReviewEntity) -> Review:
    return Review(
        id=review.id.value,
        card_id=review.card_id.value,
        review_date=review.review_date,
        grade=review.grade.value,
        response_time_ms=review.response_time_ms,
        previous_interval=review.previous_interval,
        new_interval=review.new_interval,
        a_factor_before=review.a_factor_before,
        a_factor_after=review.a_factor_after,
        optimal_factor_used=review.optimal_factor_used,
    )
