"""Catalog router - product endpoints"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from ...errors import NotFound
from ...models import Product
from ...schemas import SuccessResponse
from ...shared.validation import parse_body
from ...storage import Stores, get_stores
from .repository import ProductRepository
from .schemas import ProductPayload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


def get_product_repository(stores: Stores = Depends(get_stores)) -> ProductRepository:
    return stores.products


@router.get("", response_model=list[Product])
def list_products(repo: ProductRepository = Depends(get_product_repository)):
    return repo.list()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    product = repo.get(product_id)
    if not product:
        raise NotFound("Product not found")
    return product


@router.post("", response_model=Product, status_code=201)
def create_product(
    data: ProductPayload,
    repo: ProductRepository = Depends(get_product_repository),
):
    """Add a service to the catalog"""
    product = repo.create_product(**data.model_dump(exclude_none=True))
    logger.info(f"🛍️ Product {product.id} created: {product.name}")
    return product


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    payload: Any = Body(None),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Replace a product; category and duration are kept when omitted"""
    if not repo.get(product_id):
        raise NotFound("Product not found")
    data = parse_body(ProductPayload, payload)
    product = repo.replace_product(product_id, **data.model_dump(exclude_none=True))
    if not product:
        raise NotFound("Product not found")
    logger.info(f"🛍️ Product {product_id} updated")
    return product


@router.delete("/{product_id}", response_model=SuccessResponse)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_product_repository)):
    # Orders keep their own snapshot of items, so removal is always safe
    if not repo.delete(product_id):
        raise NotFound("Product not found")
    logger.info(f"🗑️ Product {product_id} deleted")
    return SuccessResponse()
