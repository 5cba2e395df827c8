from fastapi import APIRouter

from spacerep.config import get_settings
from spacerep.feature_flags import get_feature_flags
from spacerep.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Returns non-user-specific settings that affect application behavior.
    This is a public endpoint that doesn't require authentication.
    """
    return AppSettingsResponse(
        feature_flags=get_feature_flags(),
        max_generation_text_length=get_settings().MAX_GENERATION_TEXT_LENGTH,
    )
