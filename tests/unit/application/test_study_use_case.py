from datetime import UTC, date, datetime
from unittest.mock import MagicMock

import pytest

from spacerep.application.learning.use_cases.dtos.statistics_dtos import DailyStatistics
from spacerep.application.learning.use_cases.exceptions import CardNotFoundError
from spacerep.application.learning.use_cases.study_use_case import StudyUseCase
from spacerep.domain.common.exceptions import ValidationError as DomainValidationError
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import Card
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor
from spacerep.domain.learning.entities.study_profile import StudyProfile
from spacerep.domain.learning.value_objects.scheduling import MAX_RESPONSE_TIME_MS
from spacerep.exceptions import DeckNotFoundError, ValidationError


def make_card(**state: object) -> Card:
    card = Card(
        id=CardId(7),
        user_id=UserId(1),
        deck_id=DeckId(3),
        front_content="front",
        back_content="back",
    )
    for name, value in state.items():
        setattr(card, name, value)
    return card


@pytest.fixture
def repos() -> dict[str, MagicMock]:
    card_repository = MagicMock()
    card_repository.save.side_effect = lambda card: card
    review_repository = MagicMock()
    review_repository.save.side_effect = lambda review: review
    optimal_factor_repository = MagicMock()
    optimal_factor_repository.find.return_value = None
    optimal_factor_repository.save.side_effect = lambda cell: cell
    study_profile_repository = MagicMock()
    study_profile_repository.get.return_value = StudyProfile(user_id=UserId(1))
    study_profile_repository.get_for_update.return_value = StudyProfile(user_id=UserId(1))
    statistics_repository = MagicMock()
    statistics_repository.find_day.return_value = None
    return {
        "unit_of_work": MagicMock(),
        "card_repository": card_repository,
        "deck_repository": MagicMock(),
        "review_repository": review_repository,
        "optimal_factor_repository": optimal_factor_repository,
        "study_profile_repository": study_profile_repository,
        "statistics_repository": statistics_repository,
    }


@pytest.fixture
def use_case(repos: dict[str, MagicMock]) -> StudyUseCase:
    return StudyUseCase(**repos)


class TestReviewCard:
    def test_review_new_card(self, use_case: StudyUseCase, repos: dict[str, MagicMock]) -> None:
        repos["card_repository"].find_by_id.return_value = make_card()

        outcome = use_case.review_card(7, 1, grade=4, response_time_ms=1500)

        assert outcome.card.repetition_count == 1
        assert outcome.review.grade.value == 4
        assert outcome.review.previous_interval is None
        repos["optimal_factor_repository"].save.assert_not_called()
        repos["study_profile_repository"].save.assert_called_once()
        repos["statistics_repository"].refresh_day.assert_called_once()
        repos["unit_of_work"].commit.assert_called_once()
        repos["unit_of_work"].__enter__.assert_called_once()

    def test_review_creates_matrix_cell(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        repos["card_repository"].find_by_id.return_value = make_card(
            repetition_count=2,
            interval_days=6,
            last_reviewed_at=datetime(2026, 1, 1, tzinfo=UTC),
        )

        outcome = use_case.review_card(7, 1, grade=5)

        cell = repos["optimal_factor_repository"].save.call_args.args[0]
        assert cell.key == (3, 12)
        assert cell.usage_count == 1
        assert cell.optimal_factor == pytest.approx(2.675)
        assert outcome.card.of_matrix_updates["optimal_factor"] == pytest.approx(2.675)
        assert outcome.review.optimal_factor_used == 2.5

    def test_review_blends_existing_cell(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        repos["card_repository"].find_by_id.return_value = make_card(
            repetition_count=2,
            interval_days=6,
            last_reviewed_at=datetime(2026, 1, 1, tzinfo=UTC),
        )
        repos["optimal_factor_repository"].find.return_value = OptimalFactor(
            user_id=UserId(1),
            repetition_number=3,
            difficulty_category=12,
            optimal_factor=2.0,
            usage_count=1,
        )

        outcome = use_case.review_card(7, 1, grade=4)

        assert outcome.card.interval_days == 12
        assert outcome.review.optimal_factor_used == 2.0
        cell = repos["optimal_factor_repository"].save.call_args.args[0]
        assert cell.usage_count == 2
        assert cell.optimal_factor == pytest.approx(2.0)

    def test_review_missing_card(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        repos["card_repository"].find_by_id.return_value = None

        with pytest.raises(CardNotFoundError):
            use_case.review_card(7, 1, grade=3)

        repos["unit_of_work"].commit.assert_not_called()

    def test_review_invalid_grade(self, use_case: StudyUseCase) -> None:
        with pytest.raises(DomainValidationError):
            use_case.review_card(7, 1, grade=9)

    def test_review_response_time_too_long(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        repos["card_repository"].find_by_id.return_value = make_card()

        with pytest.raises(DomainValidationError):
            use_case.review_card(7, 1, grade=4, response_time_ms=MAX_RESPONSE_TIME_MS + 1)

        repos["card_repository"].save.assert_not_called()
        repos["review_repository"].save.assert_not_called()
        repos["unit_of_work"].commit.assert_not_called()

    def test_review_locks_profile_before_reading_card(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        calls: list[str] = []
        profile = StudyProfile(user_id=UserId(1))

        def lock_profile(user_id: UserId) -> StudyProfile:
            calls.append("lock")
            return profile

        def find_card(card_id: CardId, user_id: UserId) -> Card:
            calls.append("find_card")
            return make_card()

        repos["study_profile_repository"].get_for_update.side_effect = lock_profile
        repos["card_repository"].find_by_id.side_effect = find_card

        use_case.review_card(7, 1, grade=4, response_time_ms=2000)

        assert calls == ["lock", "find_card"]
        repos["study_profile_repository"].get.assert_not_called()
        repos["study_profile_repository"].save.assert_called_once_with(profile)
        assert profile.total_reviews == 1
        assert profile.total_study_time_seconds == 2


class TestStudyQueue:
    def test_allowances_subtract_todays_work(
        self, use_case: StudyUseCase, repos: dict[str, MagicMock]
    ) -> None:
        repos["study_profile_repository"].get.return_value = StudyProfile(
            user_id=UserId(1), daily_new_cards=5, daily_review_limit=10
        )
        repos["statistics_repository"].find_day.return_value = DailyStatistics(
            day=date(2026, 3, 1), reviews_completed=10, new_cards_learned=2
        )
        repos["card_repository"].find_new.return_value = [make_card()]

        queue = use_case.get_study_queue(1, limit=20)

        assert queue.reviews_remaining_today == 0
        assert queue.new_cards_remaining_today == 3
        repos["card_repository"].find_due_reviews.assert_not_called()
        assert repos["card_repository"].find_new.call_args.args[1] == 3
        assert len(queue.cards) == 1

    @pytest.mark.parametrize("limit", [0, 201])
    def test_limit_validation(self, use_case: StudyUseCase, limit: int) -> None:
        with pytest.raises(ValidationError):
            use_case.get_study_queue(1, limit=limit)

    def test_unknown_deck(self, use_case: StudyUseCase, repos: dict[str, MagicMock]) -> None:
        repos["deck_repository"].find_by_id.return_value = None

        with pytest.raises(DeckNotFoundError):
            use_case.get_study_queue(1, deck_id=42)


def test_update_preferences_requires_a_value(use_case: StudyUseCase) -> None:
    with pytest.raises(ValidationError):
        use_case.update_preferences(1)
