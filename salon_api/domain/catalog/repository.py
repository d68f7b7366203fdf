"""Catalog repository - in-memory product store"""

from typing import Optional

from ...models import Product
from ...shared.memory_store import InMemoryRepository


class ProductRepository(InMemoryRepository[Product]):
    """Products keyed by id; deletion is permanent and ids are not reused"""

    def create_product(self, **fields) -> Product:
        return self.add(lambda new_id: Product(id=new_id, **fields))

    def replace_product(self, product_id: int, **fields) -> Optional[Product]:
        """Replace a product's fields; None if the id is absent"""
        return self.update(product_id, **fields)
