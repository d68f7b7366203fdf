"""Order service - checkout capture"""

import logging

from ...models import Order
from .repository import OrderRepository
from .schemas import OrderCreate

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for the order log"""

    def __init__(self, repo: OrderRepository):
        self.repo = repo

    def list_orders(self) -> list[Order]:
        return self.repo.list()

    def place_order(self, data: OrderCreate, user_id: int) -> Order:
        # The total is not checked against the items, nor the payment intent
        # against Stripe; the checkout frontend is trusted for both.
        order = self.repo.append(
            items=data.items,
            total=data.total,
            customer=data.customer,
            paymentIntentId=data.paymentIntentId,
            userId=user_id,
        )
        logger.info(
            f"🧾 Order {order.id} placed by user {user_id}: total={order.total}, "
            f"items={len(order.items)}, payment_intent={order.paymentIntentId}"
        )
        return order
