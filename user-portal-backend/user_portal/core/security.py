# File: user_portal/core/security.py

"""
Password hashing helpers.

Stored hashes look like ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``
so the cost can be raised later without invalidating existing rows.
The repository layer never hashes; callers hash before ``create``.
"""

import hashlib
import hmac
import os
from typing import Optional

from user_portal.core.config import settings

HASH_SCHEME = "pbkdf2_sha256"
SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """
    Hash a plain-text password with PBKDF2-HMAC-SHA256 and a random salt.
    """
    rounds = iterations or settings.password_iterations
    salt = os.urandom(SALT_BYTES)
    digest = _derive(password, salt, rounds)
    return f"{HASH_SCHEME}${rounds}${salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plain password against a stored hash.

    Malformed or foreign hashes simply fail verification.
    """
    try:
        scheme, rounds, salt_hex, digest_hex = hashed_password.split("$")
        if scheme != HASH_SCHEME:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        iterations = int(rounds)
    except (AttributeError, ValueError):
        return False

    return hmac.compare_digest(_derive(plain_password, salt, iterations), expected)
