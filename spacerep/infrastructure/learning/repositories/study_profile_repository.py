"""Repository for study profiles stored on the users table."""

from sqlalchemy.orm import Session

from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.identity.exceptions import UserNotFoundError
from spacerep.domain.learning.entities.study_profile import StudyProfile
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.mappers.study_profile_mapper import StudyProfileMapper
from spacerep.models import User as UserORM


class StudyProfileRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudyProfileMapper()

    def _get_user(self, user_id: UserId, *, lock: bool = False) -> UserORM:
        orm_model = self.db.get(
            UserORM, user_id.value, with_for_update=lock or None, populate_existing=lock
        )
        if orm_model is None:
            raise UserNotFoundError(user_id.value)
        return orm_model

    def get(self, user_id: UserId) -> StudyProfile:
        """
        Study profile of a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self.mapper.to_domain(self._get_user(user_id))

    def get_for_update(self, user_id: UserId) -> StudyProfile:
        """
        Study profile of a user, locking the user row until the transaction ends.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        return self.mapper.to_domain(self._get_user(user_id, lock=True))

    def save(self, profile: StudyProfile) -> StudyProfile:
        orm_model = self.mapper.to_orm(profile, self._get_user(profile.user_id))
        commit_or_flush(self.db)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
