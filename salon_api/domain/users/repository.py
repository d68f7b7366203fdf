"""User repository - in-memory credential store"""

from typing import Optional

from ...errors import DuplicateEmail
from ...models import User
from ...shared.memory_store import InMemoryRepository


class UserRepository(InMemoryRepository[User]):
    """Credential records; created on signup and never mutated or deleted"""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (exact, case-sensitive match)"""
        matches = self.list(lambda u: u.email == email)
        return matches[0] if matches else None

    def create_if_absent(self, email: str, password_hash: str) -> User:
        """Create a user unless the email is already registered"""
        with self._lock:
            if any(u.email == email for u in self._records.values()):
                raise DuplicateEmail()
            user = User(id=self._allocate_id(), email=email, passwordHash=password_hash)
            self._records[user.id] = user
            return user.model_copy()
