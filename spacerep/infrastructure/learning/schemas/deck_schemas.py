"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from spacerep.application.learning.use_cases.dtos.deck_dtos import DeckCardCounts
from spacerep.domain.learning.entities.deck import Deck as DeckEntity


class DeckBase(BaseModel):
    """Base schema for Deck."""

    title: str = Field(..., min_length=1, max_length=100, description="Deck title")
    description: str | None = Field(None, max_length=1000, description="Optional description")
    is_public: bool = Field(False, description="Whether the deck is shared publicly")


class DeckCreateRequest(DeckBase):
    """Schema for creating a deck."""


class DeckUpdateRequest(BaseModel):
    """Schema for updating a deck."""

    title: str | None = Field(None, min_length=1, max_length=100, description="New title")
    description: str | None = Field(None, max_length=1000, description="New description")
    is_public: bool | None = Field(None, description="New visibility")


class Deck(DeckBase):
    """Schema for Deck response."""

    id: int
    user_id: int
    card_count: int = Field(0, description="Number of cards in the deck")
    due_count: int = Field(0, description="Reviewed cards due now")
    new_count: int = Field(0, description="Cards never studied")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeckResponse(BaseModel):
    """Schema for deck create/update responses."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    deck: Deck = Field(..., description="The deck")


class DecksListResponse(BaseModel):
    """Schema for list of decks response."""

    decks: list[Deck] = Field(..., description="List of decks with card counts")


def deck_to_schema(deck: DeckEntity, counts: DeckCardCounts | None = None) -> Deck:
    """Build the API representation of a deck, with card counts when known."""
    counts = counts or DeckCardCounts()
    return Deck(
        id=deck.id.value,
        user_id=deck.user_id.value,
        title=deck.title,
        description=deck.description,
        is_public=deck.is_public,
        card_count=counts.card_count,
        due_count=counts.due_count,
        new_count=counts.new_count,
        created_at=deck.created_at,
        updated_at=deck.updated_at,
    )
