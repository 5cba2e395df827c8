from datetime import UTC, datetime

import pytest

from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor

NOW = datetime(2026, 3, 1, tzinfo=UTC)


def test_create_is_first_observation() -> None:
    cell = OptimalFactor.create(UserId(1), 3, 12, 2.675, NOW)

    assert cell.key == (3, 12)
    assert cell.optimal_factor == 2.675
    assert cell.usage_count == 1
    assert cell.last_updated == NOW


def test_factor_is_clamped() -> None:
    assert OptimalFactor.create(UserId(1), 3, 0, 9.0, NOW).optimal_factor == 3.0
    assert OptimalFactor.create(UserId(1), 3, 0, 0.5, NOW).optimal_factor == 1.3


def test_blend_moves_towards_target() -> None:
    cell = OptimalFactor.create(UserId(1), 3, 12, 2.0, NOW)

    cell.blend(3.0, NOW)

    assert cell.optimal_factor == pytest.approx(2.5)
    assert cell.usage_count == 2


def test_blend_keeps_minimum_learning_rate() -> None:
    cell = OptimalFactor(
        user_id=UserId(1),
        repetition_number=3,
        difficulty_category=12,
        optimal_factor=2.0,
        usage_count=50,
    )

    cell.blend(3.0, NOW)

    assert cell.optimal_factor == pytest.approx(2.2)


@pytest.mark.parametrize(("repetition", "category"), [(0, 1), (3, -1)])
def test_invalid_key(repetition: int, category: int) -> None:
    with pytest.raises(ValidationError):
        OptimalFactor.create(UserId(1), repetition, category, 2.5, NOW)
