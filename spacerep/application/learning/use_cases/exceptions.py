"""Exceptions for learning use cases."""

from spacerep.exceptions import NotFoundError


class CardNotFoundError(NotFoundError):
    """Card not found error."""

    def __init__(self, card_id: int) -> None:
        self.card_id = card_id
        super().__init__(f"Card with id {card_id} not found")
