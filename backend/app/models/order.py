"""
Storefront API — Order Entity
===============================

What:  The in-memory representation of an order for a single product.
Who:   Owned by InMemoryStore.

Orders are create-and-read only. product_id is checked against the product
collection when the order is created and never again.
"""

from dataclasses import dataclass


@dataclass
class Order:
    id: int
    product_id: int
    quantity: int
