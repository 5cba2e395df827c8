"""Repository for Card domain entities."""

import logging
from datetime import date, datetime, timedelta

from sqlalchemy import and_, case, delete, func, or_, select
from sqlalchemy.orm import Session

from spacerep.application.learning.use_cases.dtos.statistics_dtos import CardCounts
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import (
    MASTERED_INTERVAL_DAYS,
    STRUGGLING_A_FACTOR,
    STRUGGLING_LAPSES,
    Card,
)
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.mappers.card_mapper import CardMapper
from spacerep.models import Card as CardORM
from spacerep.utils import day_bounds, ensure_utc

logger = logging.getLogger(__name__)

is_new_card = CardORM.last_reviewed_at.is_(None)
is_mastered_card = and_(
    CardORM.last_reviewed_at.is_not(None), CardORM.interval_days >= MASTERED_INTERVAL_DAYS
)
is_struggling_card = or_(
    CardORM.lapses_count >= STRUGGLING_LAPSES, CardORM.a_factor <= STRUGGLING_A_FACTOR
)


class CardRepository:
    """Repository for Card domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()

    def find_by_id(self, card_id: CardId, user_id: UserId) -> Card | None:
        """
        Find a card by ID with user ownership check.

        Args:
            card_id: The card ID
            user_id: The user ID for ownership verification

        Returns:
            Card entity if found and owned by user, None otherwise
        """
        stmt = select(CardORM).where(
            CardORM.id == card_id.value,
            CardORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_deck(self, deck_id: DeckId, user_id: UserId) -> list[Card]:
        """
        Get all cards of a deck.

        Returns:
            List of card entities, oldest first
        """
        stmt = (
            select(CardORM)
            .where(
                CardORM.deck_id == deck_id.value,
                CardORM.user_id == user_id.value,
            )
            .order_by(CardORM.created_at, CardORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_due_reviews(
        self, user_id: UserId, now: datetime, limit: int, deck_id: DeckId | None = None
    ) -> list[Card]:
        stmt = select(CardORM).where(
            CardORM.user_id == user_id.value,
            CardORM.last_reviewed_at.is_not(None),
            CardORM.next_review_date <= now,
        )
        if deck_id is not None:
            stmt = stmt.where(CardORM.deck_id == deck_id.value)
        stmt = stmt.order_by(CardORM.next_review_date, CardORM.id).limit(limit)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_new(self, user_id: UserId, limit: int, deck_id: DeckId | None = None) -> list[Card]:
        stmt = select(CardORM).where(CardORM.user_id == user_id.value, is_new_card)
        if deck_id is not None:
            stmt = stmt.where(CardORM.deck_id == deck_id.value)
        stmt = stmt.order_by(CardORM.created_at, CardORM.id).limit(limit)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def count_by_deck(self, deck_id: DeckId, user_id: UserId) -> int:
        stmt = select(func.count(CardORM.id)).where(
            CardORM.deck_id == deck_id.value,
            CardORM.user_id == user_id.value,
        )
        return self.db.execute(stmt).scalar() or 0

    def get_counts(self, user_id: UserId, now: datetime) -> CardCounts:
        """Aggregate counts over all cards of a user.

        Due cards are previously reviewed cards whose review date has passed;
        new cards are counted separately.
        """
        is_due = and_(CardORM.last_reviewed_at.is_not(None), CardORM.next_review_date <= now)
        stmt = select(
            func.count(CardORM.id),
            func.sum(case((is_new_card, 1), else_=0)),
            func.sum(case((is_due, 1), else_=0)),
            func.sum(case((is_mastered_card, 1), else_=0)),
            func.sum(case((is_struggling_card, 1), else_=0)),
            func.avg(CardORM.a_factor),
        ).where(CardORM.user_id == user_id.value)
        total, new, due, mastered, struggling, average = self.db.execute(stmt).one()

        return CardCounts(
            total_cards=total or 0,
            new_cards=new or 0,
            due_cards=due or 0,
            mastered_cards=mastered or 0,
            struggling_cards=struggling or 0,
            average_a_factor=round(float(average), 4) if average is not None else None,
        )

    def count_due_by_day(self, user_id: UserId, start: date, days: int) -> dict[date, int]:
        """Reviewed cards falling due per day; overdue cards count on ``start``."""
        _, range_end = day_bounds(start + timedelta(days=days - 1))
        stmt = select(CardORM.next_review_date).where(
            CardORM.user_id == user_id.value,
            CardORM.last_reviewed_at.is_not(None),
            CardORM.next_review_date < range_end,
        )

        counts: dict[date, int] = {}
        for next_review_date in self.db.execute(stmt).scalars():
            day = max(ensure_utc(next_review_date).date(), start)
            counts[day] = counts.get(day, 0) + 1
        return counts

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Args:
            card: The card entity to save

        Returns:
            Saved card entity with database-generated values
        """
        if card.id.value == 0:
            orm_model = self.mapper.to_orm(card)
            self.db.add(orm_model)
        else:
            orm_model = self.db.get(CardORM, card.id.value)
            if not orm_model:
                raise ValueError(f"Card {card.id.value} not found")
            self.mapper.to_orm(card, orm_model)

        commit_or_flush(self.db)
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save_all(self, cards: list[Card]) -> list[Card]:
        """Insert new cards in one commit."""
        orm_models = [self.mapper.to_orm(card) for card in cards]
        self.db.add_all(orm_models)
        commit_or_flush(self.db)
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        logger.info(f"Created {len(orm_models)} cards")
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete(self, card_id: CardId, user_id: UserId) -> bool:
        """
        Delete a card.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(CardORM).where(
            CardORM.id == card_id.value,
            CardORM.user_id == user_id.value,
        )
        card_orm = self.db.execute(stmt).scalar_one_or_none()

        if not card_orm:
            return False

        self.db.delete(card_orm)
        commit_or_flush(self.db)
        return True

    def delete_by_deck(self, deck_id: DeckId, user_id: UserId) -> int:
        stmt = delete(CardORM).where(
            CardORM.deck_id == deck_id.value,
            CardORM.user_id == user_id.value,
        )
        result = self.db.execute(stmt)
        commit_or_flush(self.db)
        logger.info(f"Deleted {result.rowcount} cards from deck {deck_id.value}")
        return result.rowcount
