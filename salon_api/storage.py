"""
Process-local storage.

All state lives in memory and is rebuilt on every startup; nothing is
shared between processes. Handlers get the stores through ``get_stores``.
"""

import logging
from dataclasses import dataclass, field

from fastapi import Request

from .domain.appointments.repository import AppointmentRepository
from .domain.catalog.repository import ProductRepository
from .domain.catalog.seed import SEED_PRODUCTS
from .domain.orders.repository import OrderRepository
from .domain.users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class Stores:
    users: UserRepository = field(default_factory=UserRepository)
    products: ProductRepository = field(default_factory=ProductRepository)
    orders: OrderRepository = field(default_factory=OrderRepository)
    appointments: AppointmentRepository = field(default_factory=AppointmentRepository)


def build_stores(seed_catalog: bool = True) -> Stores:
    """Create empty stores, with the catalog seeded from the salon's services"""
    stores = Stores(products=ProductRepository(SEED_PRODUCTS if seed_catalog else ()))
    logger.info(
        f"📊 In-memory storage ready: {len(stores.users)} users, "
        f"{len(stores.products)} products, {len(stores.appointments)} appointments"
    )
    return stores


def get_stores(request: Request) -> Stores:
    return request.app.state.stores
