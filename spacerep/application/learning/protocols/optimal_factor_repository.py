from typing import Protocol

from spacerep.domain.common.value_objects.ids import UserId
from spacerep.domain.learning.entities.optimal_factor import OptimalFactor


class OptimalFactorRepositoryProtocol(Protocol):
    def find(
        self, user_id: UserId, repetition_number: int, difficulty_category: int
    ) -> OptimalFactor | None: ...

    def save(self, entry: OptimalFactor) -> OptimalFactor: ...
