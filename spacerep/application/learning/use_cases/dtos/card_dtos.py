"""DTOs for card and study use cases."""

from dataclasses import dataclass, field

from spacerep.domain.learning.entities.card import Card
from spacerep.domain.learning.entities.review import Review


@dataclass(frozen=True)
class CardContent:
    """Front/back pair used for bulk card creation."""

    front_content: str
    back_content: str


@dataclass(frozen=True)
class DeleteAllCardsResult:
    deleted_count: int
    message: str


@dataclass
class ReviewOutcome:
    """Card state after a review and the stored review record."""

    card: Card
    review: Review


@dataclass
class StudyQueue:
    """Cards to study now: due reviews first, then new cards."""

    review_cards: list[Card] = field(default_factory=list)
    new_cards: list[Card] = field(default_factory=list)
    reviews_remaining_today: int = 0
    new_cards_remaining_today: int = 0

    @property
    def cards(self) -> list[Card]:
        return [*self.review_cards, *self.new_cards]
