"""
Storefront API — Order Route Handlers
=======================================

What:  Create and read endpoints over the order collection.
Who:   Any API client. No authentication.

Endpoints:
    GET  /api/orders        → 200 list (insertion order)
    GET  /api/orders/{id}   → 200 order | 404
    POST /api/orders        → 201 order + Location | 400 | 409

Orders have no update or delete endpoint. Their product reference is
validated once, on creation; deleting the product afterwards leaves the
order in place.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.schemas.catalog import OrderCreate, OrderResponse
from app.schemas.system import ErrorResponse
from app.store import InMemoryStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="List all orders",
)
async def list_orders(
    store: InMemoryStore = Depends(get_store),
) -> List[OrderResponse]:
    return [OrderResponse.from_entity(o) for o in store.list_orders()]


@router.get(
    "/{order_id:signed_int}",
    response_model=OrderResponse,
    responses={404: {"description": "Order not found", "model": ErrorResponse}},
    summary="Get an order by id",
)
async def get_order(
    order_id: int,
    store: InMemoryStore = Depends(get_store),
) -> OrderResponse:
    return OrderResponse.from_entity(store.get_order(order_id))


@router.post(
    "",
    status_code=201,
    response_model=OrderResponse,
    responses={
        201: {"description": "Order created", "model": OrderResponse},
        400: {"description": "The referenced product does not exist", "model": ErrorResponse},
        409: {"description": "An order with this id already exists", "model": ErrorResponse},
    },
    summary="Create an order",
)
async def create_order(
    payload: OrderCreate,
    response: Response,
    store: InMemoryStore = Depends(get_store),
) -> OrderResponse:
    """
    Add an order under its caller-assigned id.

    Checks, in order: productId exists (else 400), id is free (else 409).
    """
    order = store.create_order(payload.to_entity())
    response.headers["Location"] = f"/api/orders/{order.id}"
    return OrderResponse.from_entity(order)
