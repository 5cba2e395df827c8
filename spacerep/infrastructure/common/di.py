from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from spacerep.core import container
from spacerep.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """Turn a container provider into a FastAPI dependency bound to the request session."""

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
