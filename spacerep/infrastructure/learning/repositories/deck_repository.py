"""Repository for Deck domain entities."""

import logging
from datetime import datetime

from sqlalchemy import and_, case, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from spacerep.application.learning.use_cases.dtos.deck_dtos import DeckCardCounts
from spacerep.domain.common.value_objects.ids import DeckId, UserId
from spacerep.domain.learning.entities.deck import Deck
from spacerep.domain.learning.exceptions import DeckTitleAlreadyExistsError
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.mappers.deck_mapper import DeckMapper
from spacerep.models import Card as CardORM
from spacerep.models import Deck as DeckORM

logger = logging.getLogger(__name__)


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_title(self, title: str, user_id: UserId) -> Deck | None:
        stmt = select(DeckORM).where(
            DeckORM.title == title,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, user_id: UserId) -> list[Deck]:
        stmt = (
            select(DeckORM)
            .where(DeckORM.user_id == user_id.value)
            .order_by(DeckORM.title, DeckORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def get_card_counts(self, user_id: UserId, now: datetime) -> dict[int, DeckCardCounts]:
        """
        Card counts per deck.

        Returns:
            Mapping of deck id to counts; decks without cards are absent
        """
        is_new = CardORM.last_reviewed_at.is_(None)
        is_due = and_(CardORM.last_reviewed_at.is_not(None), CardORM.next_review_date <= now)
        stmt = (
            select(
                CardORM.deck_id,
                func.count(CardORM.id),
                func.sum(case((is_due, 1), else_=0)),
                func.sum(case((is_new, 1), else_=0)),
            )
            .where(CardORM.user_id == user_id.value)
            .group_by(CardORM.deck_id)
        )
        return {
            deck_id: DeckCardCounts(
                card_count=total or 0, due_count=due or 0, new_count=new or 0
            )
            for deck_id, total, due, new in self.db.execute(stmt).all()
        }

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Raises:
            DeckTitleAlreadyExistsError: If the user already has a deck with this title
        """
        existing = self.find_by_title(deck.title, deck.user_id)
        if existing and existing.id != deck.id:
            raise DeckTitleAlreadyExistsError(deck.title)

        if deck.id.value == 0:
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
        else:
            orm_model = self.db.get(DeckORM, deck.id.value)
            if not orm_model:
                raise ValueError(f"Deck {deck.id.value} not found")
            self.mapper.to_orm(deck, orm_model)

        try:
            commit_or_flush(self.db)
        except IntegrityError as e:
            self.db.rollback()
            if "title" in str(e.orig):
                raise DeckTitleAlreadyExistsError(deck.title) from e
            raise

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck; its cards and their reviews go with it.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        deck_orm = self.db.execute(stmt).scalar_one_or_none()

        if not deck_orm:
            return False

        self.db.delete(deck_orm)
        commit_or_flush(self.db)
        logger.info(f"Deleted deck {deck_id.value} for user {user_id.value}")
        return True
