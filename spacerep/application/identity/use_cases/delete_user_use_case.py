"""Use case for deleting a user account."""

import structlog

from spacerep.application.identity.protocols.password_service import PasswordServiceProtocol
from spacerep.application.identity.protocols.user_repository import UserRepositoryProtocol
from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.identity.exceptions import PasswordVerificationError, UserNotFoundError

logger = structlog.get_logger(__name__)


class DeleteUserUseCase:
    """Delete an account together with all of its study data."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service

    def delete_user(self, user_id: int, password: str) -> None:
        """
        Delete the account after confirming its password.

        Decks, cards, reviews, the optimal factor matrix and daily statistics
        are removed by the database cascade.

        Raises:
            UserNotFoundError: If user is not found
            PasswordVerificationError: If the password does not match
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        if not user.hashed_password or not self.password_service.verify_password(
            password, user.hashed_password
        ):
            raise PasswordVerificationError

        self.user_repository.delete(user.id)

        logger.info("user_deleted", user_id=user_id)
