import logging

import bcrypt

logger = logging.getLogger("auth-service")

MAX_BCRYPT_BYTES = 72
DEFAULT_ROUNDS = 10


def password_too_long(plain: str) -> bool:
    return len(plain.encode("utf-8")) > MAX_BCRYPT_BYTES


def hash_password(plain: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plaintext password with bcrypt. Returns the hash string."""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(plain: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    if not password_hash or password_too_long(plain):
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        # malformed stored hash
        logger.warning("Password check error: %s", e)
        return False
