"""Use case for study statistics and the review forecast."""

from datetime import timedelta

from spacerep.application.learning.protocols.card_repository import CardRepositoryProtocol
from spacerep.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from spacerep.application.learning.protocols.statistics_repository import (
    StatisticsRepositoryProtocol,
)
from spacerep.application.learning.protocols.study_profile_repository import (
    StudyProfileRepositoryProtocol,
)
from spacerep.application.learning.use_cases.dtos.statistics_dtos import (
    DailyStatistics,
    DeckDistributionEntry,
    ForecastDay,
    StatisticsSummary,
)
from spacerep.domain.common.value_objects.ids import UserId
from spacerep.exceptions import ValidationError
from spacerep.utils import utc_now

MAX_DAILY_RANGE = 365
MAX_FORECAST_DAYS = 365


def _validate_days(days: int, maximum: int) -> None:
    if not 1 <= days <= maximum:
        raise ValidationError(f"days must be between 1 and {maximum}")


class StatisticsUseCase:
    """Read-only views over cards, reviews and daily statistics."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
        study_profile_repository: StudyProfileRepositoryProtocol,
        statistics_repository: StatisticsRepositoryProtocol,
    ) -> None:
        self.card_repository = card_repository
        self.deck_repository = deck_repository
        self.study_profile_repository = study_profile_repository
        self.statistics_repository = statistics_repository

    def get_summary(self, user_id: int) -> StatisticsSummary:
        """Card counts, lifetime counters and today's activity."""
        user_id_vo = UserId(user_id)
        now = utc_now()

        counts = self.card_repository.get_counts(user_id_vo, now)
        profile = self.study_profile_repository.get(user_id_vo)
        today = self.statistics_repository.find_day(user_id_vo, now.date())

        return StatisticsSummary(
            cards=counts,
            total_reviews=profile.total_reviews,
            current_streak=profile.current_streak_as_of(now.date()),
            longest_streak=profile.longest_streak,
            total_study_time_minutes=round(profile.total_study_time_seconds / 60),
            reviews_today=today.reviews_completed if today else 0,
            accuracy_today=today.accuracy_rate if today else 0.0,
        )

    def get_daily_statistics(self, user_id: int, days: int = 7) -> list[DailyStatistics]:
        """
        One entry per day for the last ``days`` days including today.

        Days without reviews are zero-filled.

        Raises:
            ValidationError: If days is outside 1..MAX_DAILY_RANGE
        """
        _validate_days(days, MAX_DAILY_RANGE)

        end = utc_now().date()
        start = end - timedelta(days=days - 1)
        stored = {
            entry.day: entry
            for entry in self.statistics_repository.find_range(UserId(user_id), start, end)
        }

        result = []
        for offset in range(days):
            day = start + timedelta(days=offset)
            result.append(stored.get(day) or DailyStatistics.empty(day))
        return result

    def get_deck_distribution(self, user_id: int) -> list[DeckDistributionEntry]:
        """Number of cards in each deck, ordered by deck title."""
        user_id_vo = UserId(user_id)
        decks = self.deck_repository.find_all(user_id_vo)
        counts = self.deck_repository.get_card_counts(user_id_vo, utc_now())
        return [
            DeckDistributionEntry(
                deck_id=deck.id.value,
                title=deck.title,
                card_count=counts[deck.id.value].card_count if deck.id.value in counts else 0,
            )
            for deck in decks
        ]

    def get_review_forecast(self, user_id: int, days: int = 7) -> list[ForecastDay]:
        """
        Cards falling due on each of the next ``days`` days.

        Overdue cards are counted on today.

        Raises:
            ValidationError: If days is outside 1..MAX_FORECAST_DAYS
        """
        _validate_days(days, MAX_FORECAST_DAYS)

        start = utc_now().date()
        due = self.card_repository.count_due_by_day(UserId(user_id), start, days)
        return [
            ForecastDay(day=day, due_count=due.get(day, 0))
            for day in (start + timedelta(days=offset) for offset in range(days))
        ]
