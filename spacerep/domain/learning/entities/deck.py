"""Deck entity grouping a user's cards."""

from dataclasses import dataclass
from datetime import datetime

from spacerep.domain.common.entity import Entity
from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects import DeckId, UserId

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000


def _clean_title(title: str) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Deck title cannot be empty", field="title", value=title)
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Deck title cannot exceed {MAX_TITLE_LENGTH} characters", field="title", value=title
        )
    return title


def _clean_description(description: str | None) -> str | None:
    if description is None:
        return None
    description = description.strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Deck description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
            field="description",
        )
    return description or None


@dataclass
class Deck(Entity[DeckId]):
    """
    Named collection of cards.

    Business Rules:
    - Title is 1..MAX_TITLE_LENGTH characters after stripping whitespace
    - Title is unique per user (enforced at repository level)
    - Deleting a deck deletes its cards
    """

    id: DeckId
    user_id: UserId
    title: str
    description: str | None = None
    is_public: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.title = _clean_title(self.title)
        self.description = _clean_description(self.description)

    def rename(self, title: str) -> None:
        self.title = _clean_title(title)

    def update_description(self, description: str | None) -> None:
        self.description = _clean_description(description)

    def set_visibility(self, is_public: bool) -> None:
        self.is_public = is_public

    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        description: str | None = None,
        is_public: bool = False,
    ) -> "Deck":
        """Create a new deck (ID will be 0 until persisted)."""
        return cls(
            id=DeckId.generate(),
            user_id=user_id,
            title=title,
            description=description,
            is_public=is_public,
        )

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        user_id: UserId,
        title: str,
        description: str | None,
        is_public: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            description=description,
            is_public=is_public,
            created_at=created_at,
            updated_at=updated_at,
        )
