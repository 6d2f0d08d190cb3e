"""
Password hashing helpers.

Passwords are hashed with bcrypt at a fixed cost factor.  Each call
to :func:`hash_password` draws a fresh salt, so hashing the same
password twice yields two different strings; both verify.
"""

import bcrypt

from .errors import HashingError

BCRYPT_ROUNDS = 10


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    Raises ``HashingError`` if bcrypt rejects the input (for example a
    password longer than 72 bytes).  No weaker fallback is attempted.
    """
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    except (ValueError, TypeError, AttributeError) as e:
        raise HashingError(f"Could not hash password: {e}") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` for a mismatch and for inputs bcrypt refuses to
    compare (malformed hash, over‑long password).
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
