"""Feature toggles derived from configuration."""

from typing import Literal, Self

from pydantic import BaseModel, Field

from spacerep.config import Settings, get_settings

FeatureFlagKey = Literal["ai", "user_registrations"]


class FeatureFlags(BaseModel):
    """Switches that clients read from ``GET /settings`` to hide unavailable features."""

    ai: bool = Field(..., description="Whether AI flashcard generation is enabled")
    user_registrations: bool = Field(..., description="Whether new accounts can be registered")

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            ai=settings.ai_enabled,
            user_registrations=settings.ALLOW_USER_REGISTRATIONS,
        )

    def is_enabled(self, key: FeatureFlagKey) -> bool:
        return bool(getattr(self, key))


def get_feature_flags() -> FeatureFlags:
    return FeatureFlags.from_settings(get_settings())


def is_ai_enabled() -> bool:
    return get_feature_flags().is_enabled("ai")


def is_user_registrations_enabled() -> bool:
    return get_feature_flags().is_enabled("user_registrations")
