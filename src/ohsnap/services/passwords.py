"""Password hashing with bcrypt."""

import base64
import hashlib

import bcrypt

MIN_ROUNDS = 10


def _pre_hash(password: str) -> bytes:
    """Digest the password so inputs longer than bcrypt's 72-byte limit still count.

    The digest is base64 encoded to keep NUL bytes out of the bcrypt input.
    """
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str, rounds: int = MIN_ROUNDS) -> str:
    """Return a salted bcrypt hash for storage."""
    salt = bcrypt.gensalt(rounds=max(rounds, MIN_ROUNDS))
    return bcrypt.hashpw(_pre_hash(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Return True when the password matches the stored hash."""
    try:
        return bcrypt.checkpw(_pre_hash(password), password_hash.encode("utf-8"))
    except ValueError:
        return False
