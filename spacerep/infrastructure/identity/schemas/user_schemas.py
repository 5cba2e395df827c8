import re

from pydantic import BaseModel, EmailStr, Field, field_validator

MIN_PASSWORD_LENGTH = 8
PASSWORD_RULES = (
    (re.compile(r"[A-Z]"), "one uppercase letter"),
    (re.compile(r"[a-z]"), "one lowercase letter"),
    (re.compile(r"\d"), "one digit"),
)


def validate_password_strength(password: str) -> str:
    """Require at least one uppercase letter, one lowercase letter and one digit."""
    missing = [label for pattern, label in PASSWORD_RULES if not pattern.search(password)]
    if missing:
        raise ValueError(f"Password must contain at least {', '.join(missing)}")
    return password


class UserBase(BaseModel):
    id: int = Field(..., description="User id")
    email: str = Field(..., description="User email")


class UserDetailsResponse(UserBase):
    """Schema for returning user details."""


class UserUpdateRequest(BaseModel):
    """Schema for updating user profile."""

    email: EmailStr | None = Field(None, max_length=100, description="New email address")
    current_password: str | None = Field(
        None, min_length=1, description="Current password (required when changing password)"
    )
    new_password: str | None = Field(
        None,
        min_length=MIN_PASSWORD_LENGTH,
        description="New password (min 8 characters, mixed case and a digit)",
    )

    @field_validator("new_password")
    @classmethod
    def check_new_password(cls, value: str | None) -> str | None:
        return validate_password_strength(value) if value is not None else None


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: EmailStr = Field(..., max_length=100, description="Email for the new account")
    password: str = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password (min 8 characters, mixed case and a digit)",
    )

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        return validate_password_strength(value)


class UserDeleteRequest(BaseModel):
    """Schema for confirming account deletion."""

    password: str = Field(..., min_length=1, description="Current password")
