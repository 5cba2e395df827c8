"""Review entity: one graded recall of a card."""

from dataclasses import dataclass
from datetime import datetime

from spacerep.domain.common.entity import Entity
from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects import CardId, ReviewId, UserId
from spacerep.domain.learning.value_objects.scheduling import (
    MAX_RESPONSE_TIME_MS,
    Grade,
    ScheduleResult,
)


@dataclass
class Review(Entity[ReviewId]):
    """
    Immutable record of a review.

    previous_interval is None when the card was new at review time.
    """

    id: ReviewId
    card_id: CardId
    user_id: UserId
    review_date: datetime
    grade: Grade
    new_interval: int
    a_factor_before: float
    a_factor_after: float
    previous_interval: int | None = None
    response_time_ms: int | None = None
    optimal_factor_used: float | None = None

    def __post_init__(self) -> None:
        if self.response_time_ms is None:
            return
        if self.response_time_ms < 0:
            raise ValidationError(
                "Response time cannot be negative",
                field="response_time_ms",
                value=self.response_time_ms,
            )
        if self.response_time_ms > MAX_RESPONSE_TIME_MS:
            raise ValidationError(
                f"Response time cannot exceed {MAX_RESPONSE_TIME_MS} ms",
                field="response_time_ms",
                value=self.response_time_ms,
            )

    @property
    def was_new_card(self) -> bool:
        return self.previous_interval is None

    @classmethod
    def from_schedule(
        cls,
        card_id: CardId,
        user_id: UserId,
        result: ScheduleResult,
        response_time_ms: int | None = None,
    ) -> "Review":
        """Build the review record for a computed schedule."""
        return cls(
            id=ReviewId.generate(),
            card_id=card_id,
            user_id=user_id,
            review_date=result.reviewed_at,
            grade=result.grade,
            previous_interval=result.previous_interval,
            new_interval=result.interval_days,
            a_factor_before=result.a_factor_before,
            a_factor_after=result.a_factor,
            response_time_ms=response_time_ms,
            optimal_factor_used=result.optimal_factor_used,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ReviewId,
        card_id: CardId,
        user_id: UserId,
        review_date: datetime,
        grade: Grade,
        previous_interval: int | None,
        new_interval: int,
        a_factor_before: float,
        a_factor_after: float,
        response_time_ms: int | None,
        optimal_factor_used: float | None,
    ) -> "Review":
        """Reconstitute a review from persistence."""
        return cls(
            id=id,
            card_id=card_id,
            user_id=user_id,
            review_date=review_date,
            grade=grade,
            previous_interval=previous_interval,
            new_interval=new_interval,
            a_factor_before=a_factor_before,
            a_factor_after=a_factor_after,
            response_time_ms=response_time_ms,
            optimal_factor_used=optimal_factor_used,
        )
