"""Use case for generating flashcard suggestions from free text."""

import structlog

from spacerep.application.learning.protocols.ai_flashcard_service import (
    AIFlashcardServiceProtocol,
)
from spacerep.application.learning.use_cases.dtos.flashcard_ai_dtos import FlashcardSuggestion
from spacerep.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class GenerateFlashcardsUseCase:
    """Turn study material into question/answer suggestions with an AI model."""

    def __init__(
        self, ai_flashcard_service: AIFlashcardServiceProtocol, max_text_length: int
    ) -> None:
        self.ai_flashcard_service = ai_flashcard_service
        self.max_text_length = max_text_length

    async def generate(self, text: str) -> list[FlashcardSuggestion]:
        """
        Generate flashcard suggestions for ``text``.

        Suggestions are not stored; accepted ones are created through the
        batch card endpoint.

        Raises:
            ValidationError: If the text is empty or too long
            FlashcardGenerationError: If every configured model failed
        """
        content = (text or "").strip()
        if not content:
            raise ValidationError("Text cannot be empty")
        if len(content) > self.max_text_length:
            raise ValidationError(f"Text cannot exceed {self.max_text_length} characters")

        ai_suggestions = await self.ai_flashcard_service.generate_flashcard_suggestions(content)

        suggestions = [
            FlashcardSuggestion(question=s.question.strip(), answer=s.answer.strip())
            for s in ai_suggestions
            if s.question.strip() and s.answer.strip()
        ]

        logger.info(
            "flashcard_suggestions_generated",
            text_length=len(content),
            suggestion_count=len(suggestions),
        )
        return suggestions
