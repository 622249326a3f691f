"""
Storefront API — Product Entity
=================================

What:  The in-memory representation of a catalog product.
Who:   Owned by InMemoryStore; borrowed by route handlers for one request.

Lifecycle:
    1. Created by POST /api/products (rejected if the id is taken)
    2. name/price overwritten in place by PUT /api/products/{id}
    3. Removed by DELETE /api/products/{id}; orders that reference it are untouched
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """A product with a caller-assigned id. Only name and price are mutable."""

    id: int
    name: Optional[str]
    price: Decimal
