"""
Storefront API — Catalog Request/Response Schemas
===================================================

What:  Pydantic models defining the JSON contract for products and orders.
Why:   Request validation and OpenAPI docs all come from one place.
How:   FastAPI validates request bodies against the *Create/*Update models.
       Responses are dumped in Python mode (Decimal kept) and written by
       DecimalJSONResponse.
Who:   Used by routes/products.py and routes/orders.py.

Wire shapes:
    Product: {"id": int, "name": string|null, "price": number}
    Order:   {"id": int, "productId": int, "quantity": int}

Input rules:
    - Field names match case-insensitively ("ProductId", "PRICE", ...).
    - Only id is required. A missing name is null, a missing price,
      productId or quantity is 0. Values of the wrong type are rejected.

Schemas are separate from the dataclasses in app/models so that the JSON
field names stay out of the entity layer.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.order import Order
from app.models.product import Product


class CaseInsensitiveModel(BaseModel):
    """Base model that accepts its field names and aliases in any letter case."""

    @model_validator(mode="before")
    @classmethod
    def match_field_names_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = {}
        for name, field in cls.model_fields.items():
            known[name.lower()] = name
            if field.alias:
                known[field.alias.lower()] = field.alias
        return {
            known.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }


# ══════════════════════════════════════════════════════════════════════════
# Products
# ══════════════════════════════════════════════════════════════════════════


class ProductCreate(CaseInsensitiveModel):
    """Body of POST /api/products. The id is assigned by the caller."""

    id: int = Field(description="Caller-assigned product id, unique in the store")
    name: Optional[str] = Field(default=None, description="Free-form product name")
    price: Decimal = Field(default=Decimal("0"), description="Unit price (no sign constraint)")

    def to_entity(self) -> Product:
        return Product(id=self.id, name=self.name, price=self.price)


class ProductUpdate(CaseInsensitiveModel):
    """
    Body of PUT /api/products/{id}.

    Only name and price are applied. An "id" in the body is accepted and
    ignored: the path id is authoritative and product ids never change.
    """

    name: Optional[str] = Field(default=None, description="New product name")
    price: Decimal = Field(default=Decimal("0"), description="New unit price")


class ProductResponse(BaseModel):
    """Representation of a stored product."""

    id: int
    name: Optional[str]
    price: Decimal

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=product.price)


# ══════════════════════════════════════════════════════════════════════════
# Orders
# ══════════════════════════════════════════════════════════════════════════


class OrderCreate(CaseInsensitiveModel):
    """
    Body of POST /api/orders.

    productId must name a product present in the store at creation time.
    "product_id" is accepted on input as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Caller-assigned order id, unique in the store")
    product_id: int = Field(default=0, alias="productId", description="Id of the ordered product")
    quantity: int = Field(default=0, description="Ordered quantity (no sign constraint)")

    def to_entity(self) -> Order:
        return Order(id=self.id, product_id=self.product_id, quantity=self.quantity)


class OrderResponse(OrderCreate):
    """Representation of a stored order."""

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(id=order.id, product_id=order.product_id, quantity=order.quantity)
