from datetime import UTC, datetime, timedelta

import pytest

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects.ids import CardId, DeckId, UserId
from spacerep.domain.learning.entities.card import MAX_REVIEW_HISTORY, Card
from spacerep.domain.learning.services.scheduler import Scheduler
from spacerep.domain.learning.value_objects.scheduling import Grade

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def new_card() -> Card:
    return Card.create(
        user_id=UserId(1), deck_id=DeckId(2), front_content=" Q ", back_content=" A ", now=NOW
    )


def test_create_card() -> None:
    card = new_card()

    assert card.id == CardId(0)
    assert card.front_content == "Q"
    assert card.back_content == "A"
    assert card.is_new
    assert card.is_due(NOW)
    assert card.next_review_date == NOW
    assert card.a_factor == 2.5
    assert card.interval_days == 1


@pytest.mark.parametrize(("front", "back"), [("", "A"), ("Q", "   ")])
def test_create_requires_content(front: str, back: str) -> None:
    with pytest.raises(ValidationError):
        Card.create(user_id=UserId(1), deck_id=DeckId(1), front_content=front, back_content=back)


def test_unknown_source_type() -> None:
    with pytest.raises(ValidationError):
        Card.create(
            user_id=UserId(1),
            deck_id=DeckId(1),
            front_content="Q",
            back_content="A",
            source_type="scraped",
        )


def test_update_content() -> None:
    card = new_card()

    card.update_content(front_content="New front", back_content=None)

    assert card.front_content == "New front"
    assert card.back_content == "A"


def test_update_content_rejects_blank() -> None:
    card = new_card()

    with pytest.raises(ValidationError):
        card.update_content(front_content=None, back_content="  ")


def test_apply_review() -> None:
    card = new_card()
    result = Scheduler.schedule(card, Grade(5), NOW)

    card.apply_review(result)

    assert not card.is_new
    assert card.last_reviewed_at == NOW
    assert card.next_review_date == NOW + timedelta(days=1)
    assert card.repetition_count == 1
    assert card.review_history == [
        {
            "reviewed_at": NOW.isoformat(),
            "grade": 5,
            "interval_days": 1,
            "a_factor": 2.6,
        }
    ]
    assert not card.is_due(NOW)


def test_review_history_is_bounded() -> None:
    card = new_card()
    for day in range(MAX_REVIEW_HISTORY + 5):
        card.apply_review(Scheduler.schedule(card, Grade(3), NOW + timedelta(days=day)))

    assert len(card.review_history) == MAX_REVIEW_HISTORY
    assert card.review_history[-1]["reviewed_at"] == (
        NOW + timedelta(days=MAX_REVIEW_HISTORY + 4)
    ).isoformat()


def test_mastered_and_struggling() -> None:
    card = new_card()
    card.last_reviewed_at = NOW
    card.interval_days = 21
    assert card.is_mastered
    assert not card.is_struggling

    card.lapses_count = 3
    assert card.is_struggling


def test_reset_progress() -> None:
    card = new_card()
    card.apply_review(Scheduler.schedule(card, Grade(4), NOW))
    card.record_matrix_update(3, 12, 2.4, 2, NOW)

    card.reset_progress(NOW + timedelta(days=2))

    assert card.is_new
    assert card.repetition_count == 0
    assert card.lapses_count == 0
    assert card.review_history == []
    assert card.of_matrix_updates == {}
    assert card.next_review_date == NOW + timedelta(days=2)


def test_record_matrix_update() -> None:
    card = new_card()

    card.record_matrix_update(3, 12, 2.675, 1, NOW)

    assert card.of_matrix_updates == {
        "repetition_number": 3,
        "difficulty_category": 12,
        "optimal_factor": 2.675,
        "usage_count": 1,
        "updated_at": NOW.isoformat(),
    }


def test_is_due_from_next_review_date() -> None:
    card = new_card()
    card.apply_review(Scheduler.schedule(card, Grade(4), NOW))
    next_review = card.next_review_date

    assert next_review == NOW + timedelta(days=1)
    assert not card.is_due(next_review - timedelta(seconds=1))
    assert card.is_due(next_review)
    assert card.is_due(next_review + timedelta(days=3))
