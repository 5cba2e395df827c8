"""Per-user study counters, streaks and preferences."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects import UserId

DEFAULT_DAILY_NEW_CARDS = 20
DEFAULT_DAILY_REVIEW_LIMIT = 200
MAX_DAILY_NEW_CARDS = 1000
MAX_DAILY_REVIEW_LIMIT = 10000


def _validate_limits(daily_new_cards: int, daily_review_limit: int) -> None:
    if not 0 <= daily_new_cards <= MAX_DAILY_NEW_CARDS:
        raise ValidationError(
            f"daily_new_cards must be between 0 and {MAX_DAILY_NEW_CARDS}",
            field="daily_new_cards",
            value=daily_new_cards,
        )
    if not 1 <= daily_review_limit <= MAX_DAILY_REVIEW_LIMIT:
        raise ValidationError(
            f"daily_review_limit must be between 1 and {MAX_DAILY_REVIEW_LIMIT}",
            field="daily_review_limit",
            value=daily_review_limit,
        )


@dataclass
class StudyProfile:
    """
    Study progress of one user.

    Business Rules:
    - A streak counts consecutive calendar days (UTC) with at least one review
    - Reviewing twice on the same day does not extend the streak
    - longest_streak never drops below current_streak
    """

    user_id: UserId
    total_reviews: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    last_review_date: datetime | None = None
    total_study_time_seconds: int = 0
    daily_new_cards: int = DEFAULT_DAILY_NEW_CARDS
    daily_review_limit: int = DEFAULT_DAILY_REVIEW_LIMIT

    def __post_init__(self) -> None:
        _validate_limits(self.daily_new_cards, self.daily_review_limit)

    def record_review(self, reviewed_at: datetime, response_time_ms: int | None = None) -> None:
        """Count a review towards totals and streaks."""
        today = reviewed_at.date()
        last_day = self.last_review_date.date() if self.last_review_date else None

        if last_day == today:
            self.current_streak = max(self.current_streak, 1)
        elif last_day == today - timedelta(days=1):
            self.current_streak += 1
        elif last_day is None or last_day < today:
            self.current_streak = 1

        self.longest_streak = max(self.longest_streak, self.current_streak)
        self.total_reviews += 1
        if response_time_ms:
            self.total_study_time_seconds += round(response_time_ms / 1000)
        if self.last_review_date is None or reviewed_at > self.last_review_date:
            self.last_review_date = reviewed_at

    def current_streak_as_of(self, today: date) -> int:
        """Streak as seen on ``today``; a missed day breaks it."""
        if self.last_review_date is None:
            return 0
        if self.last_review_date.date() < today - timedelta(days=1):
            return 0
        return self.current_streak

    def update_preferences(
        self, daily_new_cards: int | None = None, daily_review_limit: int | None = None
    ) -> None:
        new_cards = self.daily_new_cards if daily_new_cards is None else daily_new_cards
        review_limit = self.daily_review_limit if daily_review_limit is None else daily_review_limit
        _validate_limits(new_cards, review_limit)
        self.daily_new_cards = new_cards
        self.daily_review_limit = review_limit
