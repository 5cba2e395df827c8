"""Mapper for Card ORM ↔ Domain conversion."""

from spacerep.domain.common.value_objects import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import Card
from spacerep.models import Card as CardORM
from spacerep.utils import ensure_utc, ensure_utc_or_none


class CardMapper:
    """Mapper for Card ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CardORM) -> Card:
        """Convert ORM model to domain entity."""
        return Card.create_with_id(
            id=CardId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            deck_id=DeckId(orm_model.deck_id),
            front_content=orm_model.front_content,
            back_content=orm_model.back_content,
            source_type=orm_model.source_type,
            a_factor=orm_model.a_factor,
            repetition_count=orm_model.repetition_count,
            interval_days=orm_model.interval_days,
            lapses_count=orm_model.lapses_count,
            next_review_date=ensure_utc(orm_model.next_review_date),
            last_reviewed_at=ensure_utc_or_none(orm_model.last_reviewed_at),
            review_history=orm_model.review_history or [],
            of_matrix_updates=orm_model.of_matrix_updates or {},
            created_at=ensure_utc_or_none(orm_model.created_at),
            updated_at=ensure_utc_or_none(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Card, orm_model: CardORM | None = None) -> CardORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = CardORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value,
            )

        orm_model.deck_id = domain_entity.deck_id.value
        orm_model.front_content = domain_entity.front_content
        orm_model.back_content = domain_entity.back_content
        orm_model.source_type = domain_entity.source_type
        orm_model.a_factor = domain_entity.a_factor
        orm_model.repetition_count = domain_entity.repetition_count
        orm_model.interval_days = domain_entity.interval_days
        orm_model.lapses_count = domain_entity.lapses_count
        orm_model.next_review_date = domain_entity.next_review_date
        orm_model.last_reviewed_at = domain_entity.last_reviewed_at
        # JSON columns are only flagged dirty on reassignment
        orm_model.review_history = list(domain_entity.review_history)
        orm_model.of_matrix_updates = dict(domain_entity.of_matrix_updates)
        return orm_model
