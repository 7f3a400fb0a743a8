"""Password Hashing & Session Tokens — passlib bcrypt context and token generation.

Invariants:
    - Plaintext passwords never leave this module except as hashes
    - verify_password() never raises on malformed hashes; it returns False
    - Session tokens are URL-safe, 256 bits of entropy
"""

import logging
import secrets
from functools import lru_cache

from passlib.context import CryptContext

from wms.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_password_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def hash_password(password: str) -> str:
    return get_password_context().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return get_password_context().verify(password, password_hash)
    except (ValueError, TypeError) as e:
        logger.warning(f"Unverifiable password hash: {e}")
        return False


def new_session_token() -> str:
    return secrets.token_urlsafe(32)
