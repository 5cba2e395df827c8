"""Mapper for Review ORM ↔ Domain conversion."""

from spacerep.domain.common.value_objects import CardId, ReviewId, UserId
from spacerep.domain.learning.entities.review import Review
from spacerep.domain.learning.value_objects.scheduling import Grade
from spacerep.models import Review as ReviewORM
from spacerep.utils import ensure_utc


class ReviewMapper:
    """Mapper for Review ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ReviewORM) -> Review:
        """Convert ORM model to domain entity."""
        return Review.create_with_id(
            id=ReviewId(orm_model.id),
            card_id=CardId(orm_model.card_id),
            user_id=UserId(orm_model.user_id),
            review_date=ensure_utc(orm_model.review_date),
            grade=Grade(orm_model.grade),
            previous_interval=orm_model.previous_interval,
            new_interval=orm_model.new_interval,
            a_factor_before=orm_model.a_factor_before,
            a_factor_after=orm_model.a_factor_after,
            response_time_ms=orm_model.response_time_ms,
            optimal_factor_used=orm_model.optimal_factor_used,
        )

    def to_orm(self, domain_entity: Review) -> ReviewORM:
        """Convert domain entity to a new ORM model; reviews are never updated."""
        return ReviewORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            card_id=domain_entity.card_id.value,
            user_id=domain_entity.user_id.value,
            review_date=domain_entity.review_date,
            grade=domain_entity.grade.value,
            response_time_ms=domain_entity.response_time_ms,
            previous_interval=domain_entity.previous_interval,
            new_interval=domain_entity.new_interval,
            a_factor_before=domain_entity.a_factor_before,
            a_factor_after=domain_entity.a_factor_after,
            optimal_factor_used=domain_entity.optimal_factor_used,
        )
