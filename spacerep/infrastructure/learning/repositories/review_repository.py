"""Repository for Review domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from spacerep.domain.common.value_objects.ids import CardId, UserId
from spacerep.domain.learning.entities.review import Review
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.mappers.review_mapper import ReviewMapper
from spacerep.models import Review as ReviewORM


class ReviewRepository:
    """Append-only store of reviews."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ReviewMapper()

    def save(self, review: Review) -> Review:
        orm_model = self.mapper.to_orm(review)
        self.db.add(orm_model)
        commit_or_flush(self.db)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_card(self, card_id: CardId, user_id: UserId) -> list[Review]:
        """Reviews of a card, newest first."""
        stmt = (
            select(ReviewORM)
            .where(
                ReviewORM.card_id == card_id.value,
                ReviewORM.user_id == user_id.value,
            )
            .order_by(ReviewORM.review_date.desc(), ReviewORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
