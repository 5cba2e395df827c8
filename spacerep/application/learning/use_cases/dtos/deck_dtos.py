"""DTOs for deck use cases."""

from dataclasses import dataclass

from spacerep.domain.learning.entities.deck import Deck


@dataclass(frozen=True)
class DeckCardCounts:
    """Card counts of one deck."""

    card_count: int = 0
    due_count: int = 0
    new_count: int = 0


@dataclass
class DeckWithCounts:
    """Deck together with its card counts."""

    deck: Deck
    counts: DeckCardCounts
