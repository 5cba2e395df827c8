"""
Card entity carrying content and spaced repetition state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from spacerep.domain.common.entity import Entity
from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects import CardId, DeckId, UserId
from spacerep.domain.learning.value_objects.scheduling import (
    FIRST_INTERVAL,
    INITIAL_A_FACTOR,
    MAX_A_FACTOR,
    MIN_A_FACTOR,
    ScheduleResult,
)
from spacerep.utils import utc_now

SourceType = Literal["manual", "ai", "import"]
SOURCE_TYPES: tuple[str, ...] = ("manual", "ai", "import")

MAX_REVIEW_HISTORY = 100
MASTERED_INTERVAL_DAYS = 21
STRUGGLING_LAPSES = 3
STRUGGLING_A_FACTOR = 1.5


def _require_content(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Card {field_name} cannot be empty", field=field_name)
    return value.strip()


@dataclass
class Card(Entity[CardId]):
    """
    Flashcard with its scheduling state.

    Business Rules:
    - Front and back content cannot be empty
    - a_factor stays within [MIN_A_FACTOR, MAX_A_FACTOR]
    - interval_days is at least 1
    - A card is new until its first review; new cards are due immediately
    - Scheduling state only changes through apply_review or reset_progress
    """

    id: CardId
    user_id: UserId
    deck_id: DeckId
    front_content: str
    back_content: str
    source_type: str = "manual"
    a_factor: float = INITIAL_A_FACTOR
    repetition_count: int = 0
    interval_days: int = FIRST_INTERVAL
    lapses_count: int = 0
    next_review_date: datetime = field(default_factory=utc_now)
    last_reviewed_at: datetime | None = None
    review_history: list[dict[str, Any]] = field(default_factory=list)
    of_matrix_updates: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _require_content(self.front_content, "front_content")
        _require_content(self.back_content, "back_content")
        if self.source_type not in SOURCE_TYPES:
            raise ValidationError(
                f"Source type must be one of {', '.join(SOURCE_TYPES)}",
                field="source_type",
                value=self.source_type,
            )
        if not MIN_A_FACTOR <= self.a_factor <= MAX_A_FACTOR:
            raise ValidationError("a_factor out of range", field="a_factor", value=self.a_factor)
        if self.interval_days < 1:
            raise ValidationError(
                "interval_days must be at least 1", field="interval_days", value=self.interval_days
            )

    @property
    def is_new(self) -> bool:
        return self.last_reviewed_at is None

    @property
    def is_mastered(self) -> bool:
        return not self.is_new and self.interval_days >= MASTERED_INTERVAL_DAYS

    @property
    def is_struggling(self) -> bool:
        return self.lapses_count >= STRUGGLING_LAPSES or self.a_factor <= STRUGGLING_A_FACTOR

    def is_due(self, now: datetime) -> bool:
        return self.next_review_date <= now

    def update_content(self, front_content: str | None, back_content: str | None) -> None:
        """
        Update the front and/or back text.

        Raises:
            ValidationError: If a provided value is empty
        """
        if front_content is not None:
            self.front_content = _require_content(front_content, "front_content")
        if back_content is not None:
            self.back_content = _require_content(back_content, "back_content")

    def move_to_deck(self, deck_id: DeckId) -> None:
        self.deck_id = deck_id

    def apply_review(self, result: ScheduleResult) -> None:
        """Adopt the scheduling state computed for a review."""
        self.a_factor = result.a_factor
        self.repetition_count = result.repetition_count
        self.interval_days = result.interval_days
        self.lapses_count = result.lapses_count
        self.next_review_date = result.next_review_date
        self.last_reviewed_at = result.reviewed_at

        entry = {
            "reviewed_at": result.reviewed_at.isoformat(),
            "grade": result.grade.value,
            "interval_days": result.interval_days,
            "a_factor": result.a_factor,
        }
        self.review_history = [*self.review_history, entry][-MAX_REVIEW_HISTORY:]

    def record_matrix_update(
        self,
        repetition_number: int,
        difficulty_category: int,
        optimal_factor: float,
        usage_count: int,
        updated_at: datetime,
    ) -> None:
        """Remember the last optimal factor matrix cell this card adjusted."""
        self.of_matrix_updates = {
            "repetition_number": repetition_number,
            "difficulty_category": difficulty_category,
            "optimal_factor": optimal_factor,
            "usage_count": usage_count,
            "updated_at": updated_at.isoformat(),
        }

    def reset_progress(self, now: datetime) -> None:
        """Forget all scheduling progress and make the card new again."""
        self.a_factor = INITIAL_A_FACTOR
        self.repetition_count = 0
        self.interval_days = FIRST_INTERVAL
        self.lapses_count = 0
        self.next_review_date = now
        self.last_reviewed_at = None
        self.review_history = []
        self.of_matrix_updates = {}

    @classmethod
    def create(
        cls,
        user_id: UserId,
        deck_id: DeckId,
        front_content: str,
        back_content: str,
        source_type: str = "manual",
        now: datetime | None = None,
    ) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(
            id=CardId.generate(),
            user_id=user_id,
            deck_id=deck_id,
            front_content=_require_content(front_content, "front_content"),
            back_content=_require_content(back_content, "back_content"),
            source_type=source_type,
            next_review_date=now or utc_now(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        user_id: UserId,
        deck_id: DeckId,
        front_content: str,
        back_content: str,
        source_type: str,
        a_factor: float,
        repetition_count: int,
        interval_days: int,
        lapses_count: int,
        next_review_date: datetime,
        last_reviewed_at: datetime | None,
        review_history: list[dict[str, Any]],
        of_matrix_updates: dict[str, Any],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            deck_id=deck_id,
            front_content=front_content,
            back_content=back_content,
            source_type=source_type,
            a_factor=a_factor,
            repetition_count=repetition_count,
            interval_days=interval_days,
            lapses_count=lapses_count,
            next_review_date=next_review_date,
            last_reviewed_at=last_reviewed_at,
            review_history=list(review_history),
            of_matrix_updates=dict(of_matrix_updates),
            created_at=created_at,
            updated_at=updated_at,
        )
