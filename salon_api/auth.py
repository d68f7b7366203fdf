import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import InvalidToken, Unauthenticated
from .security_utils import decode_access_token

logger = logging.getLogger(__name__)

# Missing or malformed headers are reported by get_current_user_id itself
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> int:
    """
    Auth gate for protected routes.

    Requires ``Authorization: Bearer <token>``. The decoded user id is
    stored on ``request.state.user_id`` and returned. Every valid token
    grants access to every protected operation.
    """
    if not credentials:
        if request.headers.get("authorization"):
            logger.warning(f"Malformed Authorization header for {request.url.path}")
            raise InvalidToken()
        logger.warning(f"Authentication required for {request.url.path}: no token")
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials)
    user_id = payload["userId"]

    request.state.user_id = user_id
    logger.debug(f"✅ User {user_id} authenticated for {request.url.path}")
    return user_id
