from functools import lru_cache

from pydantic_ai.exceptions import UserError
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.fallback import FallbackModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from spacerep.config import Settings, get_settings


def _get_model(settings: Settings, model_name: str) -> Model:
    """
    Build a Pydantic AI model for the configured provider.
    """
    # Provider credentials are guaranteed by the settings validator

    if settings.AI_PROVIDER == "ollama":
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=model_name,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )

    if settings.AI_PROVIDER == "openai":
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=model_name,
            provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
        )

    if settings.AI_PROVIDER == "openrouter":
        assert settings.OPENROUTER_API_KEY is not None
        return OpenAIChatModel(
            model_name=model_name,
            provider=OpenAIProvider(
                base_url=settings.OPENROUTER_BASE_URL, api_key=settings.OPENROUTER_API_KEY
            ),
        )

    if settings.AI_PROVIDER == "anthropic":
        assert settings.ANTHROPIC_API_KEY is not None
        return AnthropicModel(
            model_name=model_name,
            provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
        )

    if settings.AI_PROVIDER == "google":
        assert settings.GEMINI_API_KEY is not None
        return GoogleModel(
            model_name=model_name,
            provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
        )
    raise ValueError(f"No such AI model provider available: {settings.AI_PROVIDER}")


def _should_fall_back(exc: Exception) -> bool:
    # Configuration mistakes fail the same way on every model
    return not isinstance(exc, UserError)


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. The primary model is followed by AI_FALLBACK_MODELS,
    tried in order on the same provider when the previous one fails.
    """
    settings = get_settings()
    assert settings.AI_MODEL_NAME is not None

    primary = _get_model(settings, settings.AI_MODEL_NAME)
    fallbacks = [
        _get_model(settings, name)
        for name in settings.AI_FALLBACK_MODELS
        if name != settings.AI_MODEL_NAME
    ]
    if not fallbacks:
        return primary
    return FallbackModel(primary, *fallbacks, fallback_on=_should_fall_back)
