import logging

from pydantic_ai.exceptions import FallbackExceptionGroup
from pydantic_ai.settings import ModelSettings

from spacerep.application.learning.protocols.ai_flashcard_service import AIFlashcardSuggestion
from spacerep.config import get_settings
from spacerep.exceptions import FlashcardGenerationError
from spacerep.infrastructure.ai.ai_agents import get_flashcard_agent

logger = logging.getLogger(__name__)


class AIService:
    async def generate_flashcard_suggestions(self, content: str) -> list[AIFlashcardSuggestion]:
        """
        Ask the configured model(s) for flashcards.

        Raises:
            FlashcardGenerationError: If every configured model failed or timed out
        """
        agent = get_flashcard_agent()
        model_settings = ModelSettings(timeout=get_settings().AI_REQUEST_TIMEOUT_SECONDS)
        try:
            result = await agent.run(content, model_settings=model_settings)
        except FallbackExceptionGroup as e:
            errors = [f"{type(exc).__name__}: {exc}" for exc in e.exceptions]
            logger.warning(f"All AI models failed to generate flashcards: {errors}")
            raise FlashcardGenerationError("all models failed", errors) from e
        except Exception as e:
            logger.warning(f"AI model failed to generate flashcards: {e!s}", exc_info=True)
            raise FlashcardGenerationError(str(e) or type(e).__name__) from e

        return [AIFlashcardSuggestion(question=s.question, answer=s.answer) for s in result.output]
