"""
Domain common module.

Base classes for domain modeling and the shared exception hierarchy.
"""

from .entity import Entity, EntityId
from .exceptions import (
    AuthorizationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "AuthorizationError",
    "BusinessRuleViolationError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
    "ValueObject",
]
