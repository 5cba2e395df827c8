import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from spacerep.application.identity.use_cases.delete_user_use_case import DeleteUserUseCase
from spacerep.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from spacerep.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from spacerep.core import container
from spacerep.domain.common.exceptions import DomainError
from spacerep.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    RegistrationDisabledError,
)
from spacerep.exceptions import SpaceRepError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.common.rate_limit import REGISTER_RATE_LIMIT, limiter
from spacerep.infrastructure.common.schemas import SuccessResponse
from spacerep.infrastructure.identity.dependencies import CurrentUser
from spacerep.infrastructure.identity.routers.auth import clear_refresh_cookie, set_refresh_cookie
from spacerep.infrastructure.identity.schemas import (
    UserDeleteRequest,
    UserDetailsResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)
from spacerep.infrastructure.identity.services.token_service import TokenWithRefresh

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register")
@limiter.limit(REGISTER_RATE_LIMIT)  # type: ignore[misc]
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Register a new user account.

    Creates a new user with the provided email and password.
    Returns token pair for immediate login after registration.
    """
    try:
        _, token_pair = use_case.register_user(register_data.email, register_data.password)
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (SpaceRepError, DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/me")
async def get_me(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse(email=current_user.email, id=current_user.id.value)


@router.post("/me")
async def update_me(
    current_user: CurrentUser,
    update_data: UserUpdateRequest,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserDetailsResponse:
    """
    Update the current user's profile.

    - To change email: provide `email` field
    - To change password: provide both `current_password` and `new_password` fields
    """
    try:
        user = use_case.update_user(
            user_id=current_user.id.value,
            email=update_data.email,
            current_password=update_data.current_password,
            new_password=update_data.new_password,
        )
        return UserDetailsResponse(email=user.email, id=user.id.value)
    except PasswordVerificationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (SpaceRepError, DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to update user {current_user.id.value}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/me")
async def delete_me(
    current_user: CurrentUser,
    response: Response,
    delete_data: UserDeleteRequest,
    use_case: DeleteUserUseCase = Depends(inject_use_case(container.delete_user_use_case)),
) -> SuccessResponse:
    """
    Delete the current user's account and all of its decks, cards and statistics.

    The current password must be provided to confirm.
    """
    try:
        use_case.delete_user(current_user.id.value, delete_data.password)
        clear_refresh_cookie(response)
        return SuccessResponse(success=True, message="Account deleted successfully")
    except PasswordVerificationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password is incorrect",
        ) from None
    except (SpaceRepError, DomainError, HTTPException):
        raise
    except Exception as e:
        logger.error(f"Failed to delete user {current_user.id.value}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
