"""Common infrastructure schemas."""

from spacerep.infrastructure.common.schemas.response_wrappers import SuccessResponse
from spacerep.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

__all__ = [
    "AppSettingsResponse",
    "SuccessResponse",
]
