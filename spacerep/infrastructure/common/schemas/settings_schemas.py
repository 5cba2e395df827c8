from pydantic import BaseModel, Field

from spacerep.feature_flags import FeatureFlags


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
    max_generation_text_length: int = Field(
        ..., description="Longest text accepted for flashcard generation"
    )
