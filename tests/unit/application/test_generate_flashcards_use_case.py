from unittest.mock import AsyncMock

import pytest

from spacerep.application.learning.protocols.ai_flashcard_service import AIFlashcardSuggestion
from spacerep.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from spacerep.exceptions import FlashcardGenerationError, ValidationError


@pytest.fixture
def ai_service() -> AsyncMock:
    return AsyncMock()


@pytest.mark.asyncio
async def test_generate_strips_and_filters(ai_service: AsyncMock) -> None:
    ai_service.generate_flashcard_suggestions.return_value = [
        AIFlashcardSuggestion(question=" Q1 ", answer=" A1 "),
        AIFlashcardSuggestion(question="Q2", answer=""),
    ]
    use_case = GenerateFlashcardsUseCase(ai_service, max_text_length=100)

    suggestions = await use_case.generate("  some text ")

    assert [(s.question, s.answer) for s in suggestions] == [("Q1", "A1")]
    ai_service.generate_flashcard_suggestions.assert_awaited_once_with("some text")


@pytest.mark.asyncio
async def test_generate_rejects_long_text(ai_service: AsyncMock) -> None:
    use_case = GenerateFlashcardsUseCase(ai_service, max_text_length=10)

    with pytest.raises(ValidationError):
        await use_case.generate("x" * 11)


@pytest.mark.asyncio
async def test_generate_propagates_model_failure(ai_service: AsyncMock) -> None:
    ai_service.generate_flashcard_suggestions.side_effect = FlashcardGenerationError("boom")
    use_case = GenerateFlashcardsUseCase(ai_service, max_text_length=100)

    with pytest.raises(FlashcardGenerationError) as exc_info:
        await use_case.generate("text")

    assert exc_info.value.status_code == 503
