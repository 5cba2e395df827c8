"""Mapper for OptimalFactor ORM ↔ Domain conversion."""

from spacerep.domain.common.value_objects import UserId
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor
from spacerep.models import OptimalFactor as OptimalFactorORM
from spacerep.utils import ensure_utc_or_none


class OptimalFactorMapper:
    def to_domain(self, orm_model: OptimalFactorORM) -> OptimalFactor:
        return OptimalFactor(
            user_id=UserId(orm_model.user_id),
            repetition_number=orm_model.repetition_number,
            difficulty_category=orm_model.difficulty_category,
            optimal_factor=orm_model.optimal_factor,
            usage_count=orm_model.usage_count,
            last_updated=ensure_utc_or_none(orm_model.last_updated),
        )

    def to_orm(
        self, domain_entity: OptimalFactor, orm_model: OptimalFactorORM | None = None
    ) -> OptimalFactorORM:
        if orm_model is None:
            orm_model = OptimalFactorORM(
                user_id=domain_entity.user_id.value,
                repetition_number=domain_entity.repetition_number,
                difficulty_category=domain_entity.difficulty_category,
            )
        orm_model.optimal_factor = domain_entity.optimal_factor
        orm_model.usage_count = domain_entity.usage_count
        if domain_entity.last_updated is not None:
            orm_model.last_updated = domain_entity.last_updated
        return orm_model
