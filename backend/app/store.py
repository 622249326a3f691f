"""
Storefront API — In-Memory Store
==================================

What:  Owns the product and order collections for the lifetime of one
       application instance, and implements every identity check the API has.
Why:   There is no database; this object plays the role a session/repository
       plays in a persistent backend, and is injected the same way.
How:   Two insertion-ordered dicts keyed by id. Every public method runs under
       one re-entrant lock, so each operation is atomic with respect to the
       others ("last write wins" between whole operations).
Who:   Built by create_app() and stored on app.state; route handlers receive
       it through the get_store dependency.

Outcomes:
    Success returns the entity (or None for delete). Failures raise:
    ┌──────────────────────────┬─────────────────────────────────────────┐
    │ NotFoundError            │ no entity with the given id             │
    │ ConflictError            │ create with an id already in the store  │
    │ ReferenceMissingError    │ order for a product that is not stored  │
    └──────────────────────────┴─────────────────────────────────────────┘
    A failed operation never changes the store.
"""

import logging
import threading
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from fastapi import Request

from app.exceptions import ConflictError, NotFoundError, ReferenceMissingError
from app.models.order import Order
from app.models.product import Product

logger = logging.getLogger(__name__)


def default_seed_products() -> List[Product]:
    """The demo catalog a fresh store starts with."""
    return [
        Product(id=1, name="Laptop", price=Decimal("1000")),
        Product(id=2, name="Mouse", price=Decimal("25")),
        Product(id=3, name="Keyboard", price=Decimal("45")),
    ]


class InMemoryStore:
    """
    Process-memory store for products and orders.

    Enumeration order is insertion order; an update keeps a product in its
    original position, a delete followed by a re-create moves it to the end.

    Args:
        seed: Products to load on construction and on reset().
              None means an empty catalog.
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None):
        self._lock = threading.RLock()
        self._seed = list(seed or [])
        self._products: Dict[int, Product] = {}
        self._orders: Dict[int, Order] = {}
        self.reset()

    def reset(self) -> None:
        """Drop all orders and restore the seed catalog."""
        with self._lock:
            self._products = {
                p.id: Product(id=p.id, name=p.name, price=p.price) for p in self._seed
            }
            self._orders = {}
        logger.debug("Store reset with %d seed products", len(self._products))

    # ── Products ──────────────────────────────────────────────────────────

    def list_products(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def get_product(self, product_id: int) -> Product:
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            raise NotFoundError(resource="product", resource_id=product_id)
        return product

    def create_product(self, product: Product) -> Product:
        with self._lock:
            if product.id in self._products:
                raise ConflictError(resource="product", resource_id=product.id)
            self._products[product.id] = product
        logger.info("Product %d created", product.id)
        return product

    def update_product(self, product_id: int, name: Optional[str], price: Decimal) -> Product:
        """Overwrite name and price in place. The id is never changed."""
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise NotFoundError(resource="product", resource_id=product_id)
            product.name = name
            product.price = price
        logger.info("Product %d updated", product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        # Orders referencing the product are kept as-is
        with self._lock:
            if product_id not in self._products:
                raise NotFoundError(resource="product", resource_id=product_id)
            del self._products[product_id]
        logger.info("Product %d deleted", product_id)

    # ── Orders ────────────────────────────────────────────────────────────

    def list_orders(self) -> List[Order]:
        with self._lock:
            return list(self._orders.values())

    def get_order(self, order_id: int) -> Order:
        with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError(resource="order", resource_id=order_id)
        return order

    def create_order(self, order: Order) -> Order:
        """
        Add an order after checking its product reference, then its id.

        The reference check comes first: an order that both collides and
        points at a missing product is reported as a bad reference.
        """
        with self._lock:
            if order.product_id not in self._products:
                raise ReferenceMissingError(
                    resource="product",
                    resource_id=order.product_id,
                    field="productId",
                )
            if order.id in self._orders:
                raise ConflictError(resource="order", resource_id=order.id)
            self._orders[order.id] = order
        logger.info("Order %d created for product %d", order.id, order.product_id)
        return order


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> InMemoryStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Example usage in a route:
        @router.get("/products")
        async def list_products(store: InMemoryStore = Depends(get_store)):
            return store.list_products()

    Tests can swap the store with app.dependency_overrides[get_store].
    """
    return request.app.state.store
