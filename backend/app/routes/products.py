"""
Storefront API — Product Route Handlers
=========================================

What:  CRUD endpoints over the product collection.
How:   Each handler makes exactly one store call; NotFoundError and
       ConflictError raised by the store become 404/409 in main.py.
       Bodies are parsed and written with DecimalJSONRoute /
       DecimalJSONResponse so prices keep every digit.
Who:   Any API client. No authentication.

Endpoints:
    GET    /api/products        → 200 list (insertion order)
    GET    /api/products/{id}   → 200 product | 404
    POST   /api/products        → 201 product + Location | 409
    PUT    /api/products/{id}   → 200 updated product | 404
    DELETE /api/products/{id}   → 204 | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from app.models.product import Product
from app.responses import DecimalJSONResponse, DecimalJSONRoute
from app.schemas.catalog import ProductCreate, ProductResponse, ProductUpdate
from app.schemas.system import ErrorResponse
from app.store import InMemoryStore, get_store

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    route_class=DecimalJSONRoute,
    default_response_class=DecimalJSONResponse,
)

PRODUCT_PATH = "/{product_id:signed_int}"


def product_location(product_id: int) -> str:
    return f"/api/products/{product_id}"


def product_json(
    product: Product,
    status_code: int = 200,
    headers: Optional[dict] = None,
) -> DecimalJSONResponse:
    return DecimalJSONResponse(
        content=ProductResponse.from_entity(product).model_dump(),
        status_code=status_code,
        headers=headers,
    )


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List all products",
)
async def list_products(
    store: InMemoryStore = Depends(get_store),
) -> DecimalJSONResponse:
    return DecimalJSONResponse(
        content=[ProductResponse.from_entity(p).model_dump() for p in store.list_products()]
    )


@router.get(
    PRODUCT_PATH,
    response_model=ProductResponse,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Get a product by id",
)
async def get_product(
    product_id: int,
    store: InMemoryStore = Depends(get_store),
) -> DecimalJSONResponse:
    return product_json(store.get_product(product_id))


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    responses={
        201: {"description": "Product created", "model": ProductResponse},
        409: {"description": "A product with this id already exists", "model": ErrorResponse},
    },
    summary="Create a product",
)
async def create_product(
    payload: ProductCreate,
    store: InMemoryStore = Depends(get_store),
) -> DecimalJSONResponse:
    """
    Add a product under its caller-assigned id.

    The Location header points at the new product's canonical path.
    """
    product = store.create_product(payload.to_entity())
    return product_json(
        product,
        status_code=201,
        headers={"Location": product_location(product.id)},
    )


@router.put(
    PRODUCT_PATH,
    response_model=ProductResponse,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Update a product's name and price",
)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    store: InMemoryStore = Depends(get_store),
) -> DecimalJSONResponse:
    product = store.update_product(product_id, name=payload.name, price=payload.price)
    return product_json(product)


@router.delete(
    PRODUCT_PATH,
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Product not found", "model": ErrorResponse}},
    summary="Delete a product",
)
async def delete_product(
    product_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Response:
    """Remove a product. Orders that reference it are left untouched."""
    store.delete_product(product_id)
    return Response(status_code=204)
