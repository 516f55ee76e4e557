"""
In-memory product store.

``ProductStore`` owns an ordered list of product records for the
lifetime of the process and provides list, get, create, update and
delete operations over it.  A single lock guards every operation so
one instance can be shared by concurrently dispatched requests.

Expected failures (a missing identifier or a missing request body)
are not raised.  Every operation returns a ``StoreResult`` and the
API layer decides how to present an error to the client.  Callers
receive ``ProductRead`` snapshots, never the stored records.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Generic, Iterable, List, Optional, TypeVar

from product_catalog_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Product:
    """A stored product record.  Only the store mutates these."""

    id: int
    name: str
    price: Decimal
    in_stock: bool


DEFAULT_PRODUCTS = (
    Product(id=1, name="Laptop", price=Decimal("999.99"), in_stock=True),
    Product(id=2, name="Mouse", price=Decimal("29.99"), in_stock=True),
    Product(id=3, name="Keyboard", price=Decimal("79.99"), in_stock=False),
)


class StoreError(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation: a value or one of the ``StoreError`` kinds."""

    value: Optional[T] = None
    error: Optional[StoreError] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, product_id: int) -> "StoreResult[T]":
        return cls(error=StoreError.NOT_FOUND, message=f"Product with ID {product_id} not found")

    @classmethod
    def invalid_input(cls) -> "StoreResult[T]":
        return cls(error=StoreError.INVALID_INPUT, message="Product cannot be null")


class ProductStore:
    """Thread-safe in-memory collection of products."""

    def __init__(self, seed: Optional[Iterable[Product]] = None) -> None:
        self._seed = list(DEFAULT_PRODUCTS if seed is None else seed)
        self._lock = threading.Lock()
        self._products: List[Product] = []
        self.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def reset(self) -> None:
        """Restore the collection to the seed set."""
        with self._lock:
            self._products = [
                Product(id=p.id, name=p.name, price=p.price, in_stock=p.in_stock) for p in self._seed
            ]

    def list_products(self) -> StoreResult[List[ProductRead]]:
        """Return every product in insertion order."""
        with self._lock:
            logger.info("Retrieving all products")
            return StoreResult.success([self._to_read(p) for p in self._products])

    def get_product(self, product_id: int) -> StoreResult[ProductRead]:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                logger.warning("Product with ID %s not found", product_id)
                return StoreResult.not_found(product_id)
            return StoreResult.success(self._to_read(product))

    def create_product(self, data: Optional[ProductCreate]) -> StoreResult[ProductRead]:
        """Append a new product and return it with its assigned ID.

        The new ID is one more than the largest ID currently held, or
        ``1`` when the collection is empty.  Any ``id`` in ``data`` is
        ignored.
        """
        if data is None:
            logger.warning("Rejected product with missing body")
            return StoreResult.invalid_input()
        with self._lock:
            product = Product(
                id=self._next_id(),
                name=data.name,
                price=data.price,
                in_stock=data.in_stock,
            )
            self._products.append(product)
            logger.info("Created product with ID %s", product.id)
            return StoreResult.success(self._to_read(product))

    def update_product(self, product_id: int, data: Optional[ProductUpdate]) -> StoreResult[None]:
        """Overwrite name, price and stock flag of an existing product.

        The record's ID never changes, whatever ``data.id`` holds.
        """
        with self._lock:
            product = self._find(product_id)
            if product is None:
                logger.warning("Product with ID %s not found", product_id)
                return StoreResult.not_found(product_id)
            if data is None:
                logger.warning("Rejected product with missing body")
                return StoreResult.invalid_input()
            product.name = data.name
            product.price = data.price
            product.in_stock = data.in_stock
            logger.info("Updated product with ID %s", product_id)
            return StoreResult.success()

    def delete_product(self, product_id: int) -> StoreResult[None]:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                logger.warning("Product with ID %s not found", product_id)
                return StoreResult.not_found(product_id)
            self._products.remove(product)
            logger.info("Deleted product with ID %s", product_id)
            return StoreResult.success()

    # Helpers below expect the lock to be held by the caller.

    def _find(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def _next_id(self) -> int:
        if not self._products:
            return 1
        return max(p.id for p in self._products) + 1

    @staticmethod
    def _to_read(product: Product) -> ProductRead:
        """Convert a stored record to a ``ProductRead`` snapshot."""
        return ProductRead(
            id=product.id,
            name=product.name,
            price=product.price,
            in_stock=product.in_stock,
        )
