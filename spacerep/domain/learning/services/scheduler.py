"""
Review scheduler.

SM-2 style interval growth with an SM-15 style optimal factor (OF) matrix:

- The card's a_factor follows the SM-2 easiness update.
- The first two successful repetitions use fixed intervals (1 and 6 days).
- From the third repetition on, the previous interval is multiplied by the
  user's optimal factor for (repetition number, difficulty category), or by
  the card's a_factor while that matrix cell has not been learned yet.
- Every review at repetition three or later also reports how good the used
  factor was, so the matrix cell can be tuned towards it.
"""

from datetime import datetime, timedelta

from spacerep.domain.learning.entities.card import Card
from spacerep.domain.learning.value_objects.scheduling import (
    CATEGORY_STEP,
    FIRST_INTERVAL,
    MAX_DIFFICULTY_CATEGORY,
    MAX_INTERVAL_DAYS,
    MIN_A_FACTOR,
    SECOND_INTERVAL,
    Grade,
    OptimalFactorUpdate,
    ScheduleResult,
    clamp_a_factor,
)

# Repetition number from which intervals are derived from the OF matrix
MATRIX_REPETITION_START = 3


class Scheduler:
    """Stateless domain service computing the next review of a card."""

    @staticmethod
    def difficulty_category(a_factor: float) -> int:
        """Bucket an a_factor into 0..MAX_DIFFICULTY_CATEGORY (0 is hardest)."""
        category = round((a_factor - MIN_A_FACTOR) / CATEGORY_STEP)
        return min(max(category, 0), MAX_DIFFICULTY_CATEGORY)

    @staticmethod
    def next_a_factor(a_factor: float, grade: Grade) -> float:
        """SM-2 easiness update, clamped to [MIN_A_FACTOR, MAX_A_FACTOR]."""
        q = grade.value
        return clamp_a_factor(a_factor + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)))

    @staticmethod
    def target_factor(optimal_factor: float, grade: Grade) -> float:
        """Factor the review suggests would have been right.

        Grade 4 confirms the factor, 5 says intervals may grow faster,
        anything lower says they should grow slower.
        """
        return clamp_a_factor(optimal_factor * (0.72 + 0.07 * grade.value))

    @classmethod
    def matrix_key(cls, card: Card) -> tuple[int, int]:
        """OF matrix cell consulted when reviewing ``card`` next."""
        return card.repetition_count + 1, cls.difficulty_category(card.a_factor)

    @classmethod
    def schedule(
        cls,
        card: Card,
        grade: Grade,
        reviewed_at: datetime,
        optimal_factor: float | None = None,
    ) -> ScheduleResult:
        """
        Compute the card state after a review.

        Args:
            card: Card as it was before the review
            grade: Recall quality
            reviewed_at: Review time (aware datetime)
            optimal_factor: Value of the OF matrix cell for matrix_key(card),
                or None when the cell has no observations yet

        Returns:
            ScheduleResult with the new state and optional OF matrix feedback
        """
        repetition_number, category = cls.matrix_key(card)
        a_factor_before = card.a_factor
        a_factor_after = cls.next_a_factor(a_factor_before, grade)
        previous_interval = None if card.is_new else card.interval_days
        factor = optimal_factor if optimal_factor is not None else a_factor_before

        optimal_factor_used: float | None = None
        lapses = card.lapses_count

        if not grade.is_passing:
            repetition_count = 0
            interval = FIRST_INTERVAL
            if card.repetition_count > 0:
                lapses += 1
        else:
            repetition_count = repetition_number
            if repetition_number == 1:
                interval = FIRST_INTERVAL
            elif repetition_number == 2:
                interval = SECOND_INTERVAL
            else:
                base = card.interval_days
                interval = max(base + 1, round(base * factor))
                optimal_factor_used = round(factor, 4)
            interval = min(interval, MAX_INTERVAL_DAYS)

        matrix_update = None
        if repetition_number >= MATRIX_REPETITION_START:
            matrix_update = OptimalFactorUpdate(
                repetition_number=repetition_number,
                difficulty_category=category,
                target_factor=cls.target_factor(factor, grade),
            )

        return ScheduleResult(
            grade=grade,
            reviewed_at=reviewed_at,
            a_factor_before=a_factor_before,
            a_factor=a_factor_after,
            previous_interval=previous_interval,
            interval_days=interval,
            repetition_count=repetition_count,
            lapses_count=lapses,
            next_review_date=reviewed_at + timedelta(days=interval),
            optimal_factor_used=optimal_factor_used,
            matrix_update=matrix_update,
        )
