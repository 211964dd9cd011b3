"""
security/passwords.py
---------------------
One-way password hashing with bcrypt (via passlib).
Only hashes ever leave this module; plaintext is never logged.
"""

from passlib.context import CryptContext

from config import BCRYPT_ROUNDS
from repositories.exceptions import PasswordTooLongError
from utils.logger import get_logger

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Hash a plaintext password with the configured bcrypt cost factor.

    Passwords over 72 bytes (UTF-8) are refused rather than silently
    truncated, since two such passwords sharing their first 72 bytes
    would otherwise verify as equal.

    Args:
        password: Plain text password.

    Returns:
        The bcrypt hash string (60 chars, ``$2b$`` prefix).

    Raises:
        PasswordTooLongError: If the encoded password exceeds 72 bytes.
    """
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise PasswordTooLongError(MAX_PASSWORD_BYTES)
    hashed = pwd_context.hash(password)
    logger.debug("Password hashed successfully")
    return hashed


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns:
        True if the password matches. A malformed hash counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        logger.warning(f"Password verification error: {e}")
        return False
