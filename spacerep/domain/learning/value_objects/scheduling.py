"""Value objects and constants shared by cards and the review scheduler."""

from dataclasses import dataclass
from datetime import datetime

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_object import ValueObject

INITIAL_A_FACTOR = 2.5
MIN_A_FACTOR = 1.3
MAX_A_FACTOR = 3.0

FIRST_INTERVAL = 1
SECOND_INTERVAL = 6
MAX_INTERVAL_DAYS = 36500

CATEGORY_STEP = 0.1
MAX_DIFFICULTY_CATEGORY = round((MAX_A_FACTOR - MIN_A_FACTOR) / CATEGORY_STEP)

MIN_GRADE = 1
MAX_GRADE = 5
PASSING_GRADE = 3

# Longest answer time a review may record (one hour)
MAX_RESPONSE_TIME_MS = 3_600_000


def clamp_a_factor(value: float) -> float:
    return round(min(max(value, MIN_A_FACTOR), MAX_A_FACTOR), 4)


@dataclass(frozen=True)
class Grade(ValueObject):
    """Recall quality reported by the user, 1 (blackout) to 5 (perfect)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError("Grade must be an integer", field="grade", value=self.value)
        if not MIN_GRADE <= self.value <= MAX_GRADE:
            raise ValidationError(
                f"Grade must be between {MIN_GRADE} and {MAX_GRADE}",
                field="grade",
                value=self.value,
            )

    @property
    def is_passing(self) -> bool:
        return self.value >= PASSING_GRADE


@dataclass(frozen=True)
class OptimalFactorUpdate(ValueObject):
    """Feedback for one optimal factor matrix cell produced by a review."""

    repetition_number: int
    difficulty_category: int
    target_factor: float


@dataclass(frozen=True)
class ScheduleResult(ValueObject):
    """Outcome of scheduling one review of a card."""

    grade: Grade
    reviewed_at: datetime
    a_factor_before: float
    a_factor: float
    previous_interval: int | None
    interval_days: int
    repetition_count: int
    lapses_count: int
    next_review_date: datetime
    optimal_factor_used: float | None = None
    matrix_update: OptimalFactorUpdate | None = None
