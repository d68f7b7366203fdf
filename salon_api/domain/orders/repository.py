"""Order repository - append-only order log"""

from ...models import Order
from ...shared.memory_store import InMemoryRepository


class OrderRepository(InMemoryRepository[Order]):
    """Orders are only ever appended; nothing updates or deletes them"""

    def append(self, **fields) -> Order:
        return self.add(lambda new_id: Order(id=new_id, **fields))
