from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""


@dataclass(frozen=True)
class ReviewId(EntityId):
    """Strongly-typed review identifier."""
