"""
Password hashing and verification with bcrypt.

Every hash carries its own random salt, so hashing the same password
twice gives two different strings; ``verify_password`` reads the salt
back out of the stored hash.
"""

import bcrypt


def hash_password(password: str) -> str:
    """Hash a plaintext password with a freshly generated salt"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash

    Returns:
        True on match; False on mismatch or a malformed stored hash
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
