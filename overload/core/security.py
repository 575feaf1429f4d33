"""Password hashing for registered users. Sessions and tokens live outside this service."""

from functools import lru_cache

from passlib.context import CryptContext

from overload.core.config import get_settings


@lru_cache
def password_context() -> CryptContext:
    """bcrypt context; the cost factor comes from PASSWORD_HASH_ROUNDS."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().password_hash_rounds,
    )


def hash_password(plain: str) -> str:
    return password_context().hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context().verify(plain, hashed)
