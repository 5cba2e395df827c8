"""DTOs for statistics use cases."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class CardCounts:
    """Snapshot of a user's cards."""

    total_cards: int = 0
    new_cards: int = 0
    due_cards: int = 0
    mastered_cards: int = 0
    struggling_cards: int = 0
    average_a_factor: float | None = None


@dataclass
class DailyStatistics:
    """Review activity of one calendar day."""

    day: date
    reviews_completed: int = 0
    new_cards_learned: int = 0
    study_time_minutes: int = 0
    average_response_time_ms: int | None = None
    accuracy_rate: float = 0.0
    retention_rate: float = 0.0
    cards_mastered: int = 0
    cards_struggling: int = 0
    grade_counts: dict[int, int] = field(default_factory=lambda: dict.fromkeys(range(1, 6), 0))

    @classmethod
    def empty(cls, day: date) -> "DailyStatistics":
        return cls(day=day)


@dataclass
class StatisticsSummary:
    cards: CardCounts
    total_reviews: int
    current_streak: int
    longest_streak: int
    total_study_time_minutes: int
    reviews_today: int
    accuracy_today: float


@dataclass(frozen=True)
class DeckDistributionEntry:
    deck_id: int
    title: str
    card_count: int


@dataclass(frozen=True)
class ForecastDay:
    day: date
    due_count: int
