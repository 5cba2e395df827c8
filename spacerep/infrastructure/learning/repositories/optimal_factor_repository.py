"""Repository for the optimal factor matrix."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.mappers.optimal_factor_mapper import OptimalFactorMapper
from spacerep.models import OptimalFactor as OptimalFactorORM


class OptimalFactorRepository:
    """Matrix cells are keyed by (user, repetition number, difficulty category)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = OptimalFactorMapper()

    def _find_orm(
        self, user_id: UserId, repetition_number: int, difficulty_category: int
    ) -> OptimalFactorORM | None:
        stmt = select(OptimalFactorORM).where(
            OptimalFactorORM.user_id == user_id.value,
            OptimalFactorORM.repetition_number == repetition_number,
            OptimalFactorORM.difficulty_category == difficulty_category,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find(
        self, user_id: UserId, repetition_number: int, difficulty_category: int
    ) -> OptimalFactor | None:
        orm_model = self._find_orm(user_id, repetition_number, difficulty_category)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, entry: OptimalFactor) -> OptimalFactor:
        """Insert or update the cell identified by the entry's key."""
        orm_model = self._find_orm(entry.user_id, *entry.key)
        if orm_model is None:
            orm_model = self.mapper.to_orm(entry)
            self.db.add(orm_model)
        else:
            self.mapper.to_orm(entry, orm_model)

        commit_or_flush(self.db)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
