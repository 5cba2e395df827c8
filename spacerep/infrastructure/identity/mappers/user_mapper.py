"""Mapper for User ORM ↔ Domain conversion."""

from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.identity.entities.user import User
from spacerep.models import User as UserORM
from spacerep.utils import ensure_utc_or_none


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            hashed_password=orm_model.hashed_password,
            created_at=ensure_utc_or_none(orm_model.created_at),
            updated_at=ensure_utc_or_none(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model.

        Study counters live on the same row and are left untouched here.
        """
        if orm_model:
            orm_model.email = domain_entity.email
            orm_model.hashed_password = domain_entity.hashed_password
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            email=domain_entity.email,
            hashed_password=domain_entity.hashed_password,
            preferences={},
        )
