"""Identity context schemas."""

from spacerep.infrastructure.identity.schemas.user_schemas import (
    UserDeleteRequest,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)

__all__ = [
    "UserDeleteRequest",
    "UserDetailsResponse",
    "UserRegisterRequest",
    "UserUpdateRequest",
]
