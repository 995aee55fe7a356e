"""
Password hashing with bcrypt.

Each hash carries its own random salt. bcrypt only reads the first 72 bytes
of its input, so passwords are cut to that length on both hash and check.
"""

import bcrypt

_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison of ``password`` against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# Checked against when the email is unknown, so that path costs one bcrypt
# round like a wrong password does.
DUMMY_HASH = hash_password("dummy-password")
