"""Repository for per-day review statistics."""

import logging
from datetime import date

from sqlalchemy import ColumnElement, and_, case, func, select
from sqlalchemy.orm import Session

from spacerep.application.learning.use_cases.dtos.statistics_dtos import DailyStatistics
from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.value_objects.scheduling import MAX_GRADE, MIN_GRADE, PASSING_GRADE
from spacerep.infrastructure.common.unit_of_work import commit_or_flush
from spacerep.infrastructure.learning.repositories.card_repository import (
    is_mastered_card,
    is_struggling_card,
)
from spacerep.models import Card as CardORM
from spacerep.models import Review as ReviewORM
from spacerep.models import UserStatistics as UserStatisticsORM
from spacerep.utils import day_bounds

logger = logging.getLogger(__name__)

GRADES = range(MIN_GRADE, MAX_GRADE + 1)


def _count_where(condition: ColumnElement[bool]) -> ColumnElement[int]:
    return func.sum(case((condition, 1), else_=0))


def _to_dto(orm_model: UserStatisticsORM) -> DailyStatistics:
    return DailyStatistics(
        day=orm_model.day,
        reviews_completed=orm_model.reviews_completed,
        new_cards_learned=orm_model.new_cards_learned,
        study_time_minutes=orm_model.study_time_minutes,
        average_response_time_ms=orm_model.average_response_time_ms,
        accuracy_rate=orm_model.accuracy_rate,
        retention_rate=orm_model.retention_rate,
        cards_mastered=orm_model.cards_mastered,
        cards_struggling=orm_model.cards_struggling,
        grade_counts={grade: getattr(orm_model, f"grade_{grade}_count") for grade in GRADES},
    )


class StatisticsRepository:
    """Rows of ``user_statistics`` are derived from ``reviews`` and never edited by hand."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _find_orm(self, user_id: UserId, day: date) -> UserStatisticsORM | None:
        stmt = select(UserStatisticsORM).where(
            UserStatisticsORM.user_id == user_id.value,
            UserStatisticsORM.day == day,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def refresh_day(self, user_id: UserId, day: date) -> DailyStatistics:
        """
        Recompute the statistics row of ``day`` from that day's reviews.

        Mastered and struggling counts are a snapshot of the user's cards at
        the time of the call.
        """
        start, end = day_bounds(day)
        passed = ReviewORM.grade >= PASSING_GRADE
        has_previous = ReviewORM.previous_interval.is_not(None)

        stmt = select(
            func.count(ReviewORM.id),
            _count_where(ReviewORM.previous_interval.is_(None)),
            func.sum(ReviewORM.response_time_ms),
            func.avg(ReviewORM.response_time_ms),
            _count_where(passed),
            _count_where(has_previous),
            _count_where(and_(has_previous, passed)),
            *[_count_where(ReviewORM.grade == grade) for grade in GRADES],
        ).where(
            ReviewORM.user_id == user_id.value,
            ReviewORM.review_date >= start,
            ReviewORM.review_date < end,
        )
        total, new, time_ms, avg_ms, passes, previous, retained, *grade_counts = (
            self.db.execute(stmt).one()
        )
        total = total or 0

        card_stmt = select(
            _count_where(is_mastered_card), _count_where(is_struggling_card)
        ).where(CardORM.user_id == user_id.value)
        mastered, struggling = self.db.execute(card_stmt).one()

        orm_model = self._find_orm(user_id, day)
        if orm_model is None:
            orm_model = UserStatisticsORM(user_id=user_id.value, day=day)
            self.db.add(orm_model)

        orm_model.reviews_completed = total
        orm_model.new_cards_learned = new or 0
        orm_model.study_time_minutes = round((time_ms or 0) / 60000)
        orm_model.average_response_time_ms = round(avg_ms) if avg_ms is not None else None
        orm_model.accuracy_rate = round((passes or 0) / total, 4) if total else 0.0
        orm_model.retention_rate = round((retained or 0) / previous, 4) if previous else 0.0
        orm_model.cards_mastered = mastered or 0
        orm_model.cards_struggling = struggling or 0
        for grade, count in zip(GRADES, grade_counts, strict=True):
            setattr(orm_model, f"grade_{grade}_count", count or 0)

        commit_or_flush(self.db)
        self.db.refresh(orm_model)
        return _to_dto(orm_model)

    def find_day(self, user_id: UserId, day: date) -> DailyStatistics | None:
        orm_model = self._find_orm(user_id, day)
        return _to_dto(orm_model) if orm_model else None

    def find_range(self, user_id: UserId, start: date, end: date) -> list[DailyStatistics]:
        stmt = (
            select(UserStatisticsORM)
            .where(
                UserStatisticsORM.user_id == user_id.value,
                UserStatisticsORM.day >= start,
                UserStatisticsORM.day <= end,
            )
            .order_by(UserStatisticsORM.day)
        )
        return [_to_dto(orm) for orm in self.db.execute(stmt).scalars().all()]
