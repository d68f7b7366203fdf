"""
Security primitives for the credential store and token service.

Passwords are hashed with bcrypt through passlib; bearer tokens are
HS256 JWTs signed with ``JWT_SECRET`` and carrying the user id.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError
from jose import jwt as jose_jwt
from passlib.context import CryptContext

from .config import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_SECRET, TOKEN_EXPIRE_DAYS
from .errors import InvalidToken

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


# ============================================================================
# PASSWORD SECURITY
# ============================================================================


def hash_password(password: str) -> str:
    """Hash password using salted bcrypt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against bcrypt hash"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification error: {e}")
        return False


# ============================================================================
# BEARER TOKENS
# ============================================================================


def create_access_token(
    user_id: int,
    expires_delta: Optional[timedelta] = None,
    secret: str = JWT_SECRET,
) -> str:
    """
    Create a signed bearer token for a user

    Args:
        user_id: Id of the authenticated user, stored as the ``userId`` claim
        expires_delta: Token lifetime (default ``TOKEN_EXPIRE_DAYS`` days)
        secret: Signing secret
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(days=TOKEN_EXPIRE_DAYS))
    to_encode = {"userId": user_id, "iat": now, "exp": expire}
    return jose_jwt.encode(to_encode, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str = JWT_SECRET) -> dict[str, Any]:
    """
    Verify and decode a bearer token

    Returns:
        Decoded payload with an integer ``userId``

    Raises:
        InvalidToken: bad signature, expired, or missing ``userId``
    """
    try:
        payload = jose_jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT verification failed: {e}")
        raise InvalidToken() from e

    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        logger.warning("JWT verification failed: missing userId claim")
        raise InvalidToken()
    return payload


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def mask_email(email: str) -> str:
    """Mask email for logs: jo***@gm***.com"""
    if not email or "@" not in email:
        return "***@***.***"
    local, domain = email.rsplit("@", 1)
    domain_parts = domain.split(".")
    masked_local = f"{local[:2]}***" if len(local) > 2 else f"{local[:1]}***"
    masked_domain = (
        f"{domain_parts[0][:2]}***" if len(domain_parts[0]) > 2 else f"{domain_parts[0][:1]}***"
    )
    return f"{masked_local}@{masked_domain}.{domain_parts[-1]}"
