from typing import Protocol

from spacerep.domain.common.value_objects.ids import CardId, UserId
from spacerep.domain.learning.entities.review import Review


class ReviewRepositoryProtocol(Protocol):
    def save(self, review: Review) -> Review: ...

    def find_by_card(self, card_id: CardId, user_id: UserId) -> list[Review]: ...
