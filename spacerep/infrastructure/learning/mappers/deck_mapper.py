"""Mapper for Deck ORM ↔ Domain conversion."""

from spacerep.domain.common.value_objects import DeckId, UserId
from spacerep.domain.learning.entities.deck import Deck
from spacerep.models import Deck as DeckORM
from spacerep.utils import ensure_utc_or_none


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        """Convert ORM model to domain entity."""
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            description=orm_model.description,
            is_public=orm_model.is_public,
            created_at=ensure_utc_or_none(orm_model.created_at),
            updated_at=ensure_utc_or_none(orm_model.updated_at),
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.title = domain_entity.title
            orm_model.description = domain_entity.description
            orm_model.is_public = domain_entity.is_public
            return orm_model

        return DeckORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            title=domain_entity.title,
            description=domain_entity.description,
            is_public=domain_entity.is_public,
        )
