"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from spacerep.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from spacerep.core import container
from spacerep.domain.identity.entities.user import User
from spacerep.domain.identity.exceptions import UserNotFoundError
from spacerep.exceptions import CredentialsException
from spacerep.infrastructure.common.di import inject_use_case
from spacerep.infrastructure.identity.services.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    use_case: Annotated[
        AuthenticationUseCase, Depends(inject_use_case(container.authentication_use_case))
    ],
) -> User:
    """
    Resolve the bearer token to the user it was issued for.

    A valid token for an account that has since been deleted is treated the
    same as an invalid token.

    Raises:
        CredentialsException: If the token is invalid or the user no longer exists
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    try:
        return use_case.get_user_by_id(user_id)
    except UserNotFoundError:
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]
