"""Learning domain exceptions."""

from spacerep.domain.common.exceptions import BusinessRuleViolationError


class DeckTitleAlreadyExistsError(BusinessRuleViolationError):
    """Raised when a user already owns a deck with the same title."""

    def __init__(self, title: str) -> None:
        super().__init__("unique_deck_title", f"A deck titled '{title}' already exists")
        self.title = title
