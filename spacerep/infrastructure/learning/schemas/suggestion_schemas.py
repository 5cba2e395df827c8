"""Pydantic schemas for AI flashcard suggestions."""

from pydantic import BaseModel, Field


class FlashcardSuggestionsRequest(BaseModel):
    """Schema for requesting suggestions for a piece of study material."""

    text: str = Field(..., min_length=1, description="Text to generate flashcards from")


class FlashcardSuggestionItem(BaseModel):
    """Schema for a single AI-generated flashcard suggestion."""

    question: str = Field(..., description="Suggested question for flashcard")
    answer: str = Field(..., description="Suggested answer for flashcard")


class FlashcardSuggestionsResponse(BaseModel):
    """Schema for flashcard suggestions response."""

    suggestions: list[FlashcardSuggestionItem] = Field(
        ..., description="List of AI-generated flashcard suggestions"
    )
