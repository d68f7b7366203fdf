"""Auth service - signup, login and token issuance"""

import logging

from fastapi.concurrency import run_in_threadpool

from ...errors import DuplicateEmail, InvalidCredentials
from ...models import User
from ...security_utils import create_access_token, hash_password, mask_email, verify_password
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Service layer for the credential store and token service"""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, email: str, password: str) -> User:
        """Register a new user; bcrypt runs off the event loop"""
        if self.repo.get_by_email(email):
            logger.warning(f"⚠️ Signup rejected, email already registered: {mask_email(email)}")
            raise DuplicateEmail()

        password_hash = await run_in_threadpool(hash_password, password)

        # Re-checked under the store lock: another signup may have won the race
        user = self.repo.create_if_absent(email, password_hash)
        logger.info(f"🆕 User {user.id} registered: {mask_email(email)}")
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Same error for unknown email and wrong password"""
        user = self.repo.get_by_email(email)
        if not user:
            logger.info(f"Login failed for {mask_email(email)}")
            raise InvalidCredentials()

        matches = await run_in_threadpool(verify_password, password, user.passwordHash)
        if not matches:
            logger.info(f"Login failed for {mask_email(email)}")
            raise InvalidCredentials()

        logger.debug(f"✅ User {user.id} authenticated")
        return user

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(user.id)
