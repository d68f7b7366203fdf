"""Appointment repository - in-memory appointment store"""

from ...models import Appointment
from ...shared.memory_store import InMemoryRepository


class AppointmentRepository(InMemoryRepository[Appointment]):
    """Repository for appointment records"""

    def create_appointment(self, **fields) -> Appointment:
        return self.add(lambda new_id: Appointment(id=new_id, **fields))

    def list_for_user(self, user_id: int) -> list[Appointment]:
        """Get all appointments owned by a user"""
        return self.list(lambda a: a.userId == user_id)
