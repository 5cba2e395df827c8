import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from starlette import status

from spacerep.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from spacerep.config import get_settings
from spacerep.core import container
from spacerep.domain.identity.exceptions import InvalidCredentialsError
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.common.rate_limit import (
    LOGIN_RATE_LIMIT,
    REFRESH_RATE_LIMIT,
    limiter,
)
from spacerep.infrastructure.identity.services.token_service import (
    REFRESH_TOKEN_EXPIRE_DAYS,
    TokenWithRefresh,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()

REFRESH_COOKIE_PATH = f"{settings.API_V1_PREFIX}/auth"


class RefreshTokenRequest(BaseModel):
    """Request body for refresh token (used by non-browser clients)."""

    refresh_token: str | None = None


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    """Set the refresh token as an httpOnly cookie."""
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
        max_age=REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )


def clear_refresh_cookie(response: Response) -> None:
    """Clear the refresh token cookie."""
    response.delete_cookie(
        key="refresh_token",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        path=REFRESH_COOKIE_PATH,
    )


@router.post("/login")
@limiter.limit(LOGIN_RATE_LIMIT)  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    # OAuth2PasswordRequestForm calls the field 'username'; it carries the email
    try:
        _, token_pair = use_case.authenticate_user(form_data.username, form_data.password)
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None


@router.post("/refresh")
@limiter.limit(REFRESH_RATE_LIMIT)  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """
    Refresh the access token using a refresh token.

    The refresh token can be provided either:
    - In an httpOnly cookie (for web clients)
    - In the request body (for other clients)
    """
    token = refresh_token
    if not token and body and body.refresh_token:
        token = body.refresh_token

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token required",
        )

    try:
        _, token_pair = use_case.refresh_access_token(token)
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except InvalidCredentialsError:
        clear_refresh_cookie(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        ) from None


@router.post("/logout")
async def logout(response: Response) -> dict[str, str]:
    """
    Log out by clearing the refresh token cookie.

    The access token stays valid until it expires.
    """
    clear_refresh_cookie(response)
    return {"message": "Logged out successfully"}
