"""Password hashing helpers backed by bcrypt."""

import bcrypt

# bcrypt only looks at the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


def hash_password(plaintext: str, rounds: int = 12) -> str:
    """Return a salted bcrypt hash for a plaintext password."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")


def verify_password(stored_hash: str | None, plaintext: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    if not stored_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(plaintext), stored_hash.encode("utf-8"))
    except ValueError:
        return False


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_BCRYPT_MAX_BYTES]
