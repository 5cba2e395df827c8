from datetime import UTC, date, datetime, timedelta

import pytest

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.entities.study_profile import StudyProfile

DAY = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


def test_first_review_starts_streak() -> None:
    profile = StudyProfile(user_id=UserId(1))

    profile.record_review(DAY, response_time_ms=2500)

    assert profile.total_reviews == 1
    assert profile.current_streak == 1
    assert profile.longest_streak == 1
    assert profile.last_review_date == DAY
    assert profile.total_study_time_seconds == 2


def test_same_day_does_not_extend_streak() -> None:
    profile = StudyProfile(user_id=UserId(1))

    profile.record_review(DAY)
    profile.record_review(DAY + timedelta(hours=3))

    assert profile.current_streak == 1
    assert profile.total_reviews == 2


def test_consecutive_days_extend_streak() -> None:
    profile = StudyProfile(user_id=UserId(1))

    for offset in range(3):
        profile.record_review(DAY + timedelta(days=offset))

    assert profile.current_streak == 3
    assert profile.longest_streak == 3


def test_missed_day_restarts_streak() -> None:
    profile = StudyProfile(user_id=UserId(1))
    profile.record_review(DAY)
    profile.record_review(DAY + timedelta(days=1))

    profile.record_review(DAY + timedelta(days=3))

    assert profile.current_streak == 1
    assert profile.longest_streak == 2


def test_streak_as_of() -> None:
    profile = StudyProfile(user_id=UserId(1))
    profile.record_review(DAY)

    assert profile.current_streak_as_of(date(2026, 3, 1)) == 1
    assert profile.current_streak_as_of(date(2026, 3, 2)) == 1
    assert profile.current_streak_as_of(date(2026, 3, 3)) == 0
    assert StudyProfile(user_id=UserId(2)).current_streak_as_of(date(2026, 3, 1)) == 0


def test_update_preferences() -> None:
    profile = StudyProfile(user_id=UserId(1))

    profile.update_preferences(daily_new_cards=0)

    assert profile.daily_new_cards == 0
    assert profile.daily_review_limit == 200


@pytest.mark.parametrize(
    ("new_cards", "review_limit"), [(-1, None), (1001, None), (None, 0), (None, 10001)]
)
def test_update_preferences_out_of_range(new_cards: int | None, review_limit: int | None) -> None:
    profile = StudyProfile(user_id=UserId(1))

    with pytest.raises(ValidationError):
        profile.update_preferences(new_cards, review_limit)

    assert profile.daily_new_cards == 20
    assert profile.daily_review_limit == 200
