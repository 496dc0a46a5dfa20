"""
Password hashing with bcrypt.

Hashes are modular-crypt strings ("$2b$<cost>$<salt><digest>") so cost and
salt travel with the hash.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of input
BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 12


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a password with a fresh random salt.

    Two calls with the same password return different strings.

    Args:
        password: Plain text password, any length
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt hash
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Never raises: a malformed or foreign hash counts as a mismatch.
    """
    if not password or not hashed:
        return False

    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False
