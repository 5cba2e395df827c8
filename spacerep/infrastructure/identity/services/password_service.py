"""Password hashing and verification service."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from spacerep.config import get_settings

settings = get_settings()
PASSWORD_PEPPER = settings.PASSWORD_PEPPER

password_hash = PasswordHash.recommended()

# Must be a real hash: pwdlib raises UnknownHashError for arbitrary strings
DUMMY_HASH = password_hash.hash("dummy_password_for_timing_attack_prevention")


def hash_password(plain_password: str) -> str:
    """Hash a plain password for storage with pepper."""
    return password_hash.hash(plain_password + PASSWORD_PEPPER)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a peppered hash."""
    try:
        return password_hash.verify(plain_password + PASSWORD_PEPPER, hashed_password)
    except UnknownHashError:
        return False


def get_dummy_hash() -> str:
    """Get a dummy hash for timing attack prevention."""
    return DUMMY_HASH
