"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from spacerep.domain.common.entity import Entity
from spacerep.domain.common.exceptions import ValidationError
from spacerep.domain.common.value_objects.ids import UserId

MAX_EMAIL_LENGTH = 100


def _validate_email(email: str) -> None:
    if not email or not email.strip():
        raise ValidationError("Email cannot be empty", field="email", value=email)
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )
    if "@" not in email:
        raise ValidationError("Email must contain '@'", field="email", value=email)


@dataclass
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Email must be non-empty, contain '@' and be at most MAX_EMAIL_LENGTH chars
    - Password hashing is an infrastructure concern
    """

    id: UserId
    email: str
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_email(self.email)

    def has_password(self) -> bool:
        """Check if this user has a password set."""
        return self.hashed_password is not None

    def update_email(self, new_email: str) -> None:
        """
        Update the user's email address.

        Raises:
            ValidationError: If email is invalid
        """
        new_email = new_email.strip().lower()
        _validate_email(new_email)
        self.email = new_email

    def update_password(self, new_hashed_password: str) -> None:
        """Replace the stored hash (hashing is done by infrastructure)."""
        self.hashed_password = new_hashed_password

    @classmethod
    def create(cls, email: str, hashed_password: str | None = None) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(
            id=UserId.generate(),
            email=email.strip().lower(),
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        hashed_password: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )
