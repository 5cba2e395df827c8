"""Optimal factor matrix cell."""

from dataclasses import dataclass
from datetime import datetime

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects import UserId
from spacerep.domain.learning.value_objects.scheduling import clamp_a_factor

MIN_LEARNING_FRACTION = 0.2


@dataclass
class OptimalFactor:
    """
    One cell of a user's optimal factor matrix.

    The cell is identified by (user_id, repetition_number, difficulty_category).
    Its value converges towards the factors that reviews report as right for
    cards of that difficulty at that repetition: early feedback moves it a
    lot, later feedback moves it at least MIN_LEARNING_FRACTION of the way.
    """

    user_id: UserId
    repetition_number: int
    difficulty_category: int
    optimal_factor: float
    usage_count: int = 0
    last_updated: datetime | None = None

    def __post_init__(self) -> None:
        if self.repetition_number < 1:
            raise ValidationError(
                "Repetition number must be positive",
                field="repetition_number",
                value=self.repetition_number,
            )
        if self.difficulty_category < 0:
            raise ValidationError(
                "Difficulty category cannot be negative",
                field="difficulty_category",
                value=self.difficulty_category,
            )
        self.optimal_factor = clamp_a_factor(self.optimal_factor)

    @property
    def key(self) -> tuple[int, int]:
        return self.repetition_number, self.difficulty_category

    def blend(self, target: float, now: datetime) -> None:
        """Move the factor towards ``target`` and count the usage."""
        fraction = max(1 / (self.usage_count + 1), MIN_LEARNING_FRACTION)
        self.optimal_factor = clamp_a_factor(
            self.optimal_factor + fraction * (clamp_a_factor(target) - self.optimal_factor)
        )
        self.usage_count += 1
        self.last_updated = now

    @classmethod
    def create(
        cls,
        user_id: UserId,
        repetition_number: int,
        difficulty_category: int,
        optimal_factor: float,
        now: datetime,
    ) -> "OptimalFactor":
        """First observation for a cell."""
        return cls(
            user_id=user_id,
            repetition_number=repetition_number,
            difficulty_category=difficulty_category,
            optimal_factor=optimal_factor,
            usage_count=1,
            last_updated=now,
        )
