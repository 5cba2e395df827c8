"""
Unit of Work interface.

Groups several repository writes into one transaction. While a unit of
work is open, repositories only flush; the use case commits once at the end.

Example:
    with self.unit_of_work:
        self.card_repository.save(card)
        self.review_repository.save(review)
        self.unit_of_work.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    If the block raises, the transaction is rolled back. Otherwise nothing
    is persisted until commit() is called explicitly.
    """

    @abstractmethod
    def begin(self) -> None:
        """Start deferring repository commits."""
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        """Stop deferring repository commits."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persist everything written within the unit of work."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard everything written within the unit of work."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            if exc_type is not None:
                self.rollback()
        finally:
            self.end()
