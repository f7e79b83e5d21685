"""
Password hashing for user accounts.

bcrypt only looks at the first 72 bytes of a secret, so registration rejects
longer passwords (see `password_fits`) instead of letting two different
passwords share a hash.
"""
from passlib.context import CryptContext

from app.config import settings

BCRYPT_MAX_BYTES = 72

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
