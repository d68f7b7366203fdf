"""Order router - checkout endpoints"""

from fastapi import APIRouter, Depends

from ...auth import get_current_user_id
from ...models import Order
from ...schemas import SuccessResponse
from ...storage import Stores, get_stores
from .schemas import OrderCreate
from .service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def get_order_service(stores: Stores = Depends(get_stores)) -> OrderService:
    """Dependency injection for OrderService"""
    return OrderService(stores.orders)


@router.get("", response_model=list[Order])
def list_orders(service: OrderService = Depends(get_order_service)):
    """All orders (order history for the admin dashboard)"""
    return service.list_orders()


@router.post("", response_model=SuccessResponse, status_code=201)
def place_order(
    data: OrderCreate,
    user_id: int = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
):
    service.place_order(data, user_id)
    return SuccessResponse()
