"""
Pydantic schemas for product records.

``ProductBase`` carries the mutable fields shared by every payload.
``ProductCreate`` and ``ProductUpdate`` are the request bodies; both
tolerate an ``id`` key, which the store ignores.  ``ProductRead`` is
the response shape and always carries the store-assigned ``id``.

On the wire the availability flag is called ``inStock``; in Python it
is ``in_stock``.  Prices are kept as ``Decimal`` and emitted as JSON
numbers.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class ProductBase(BaseModel):
    name: str = Field("", examples=["Monitor"])
    price: Decimal = Field(Decimal("0"), examples=[199.99])
    in_stock: bool = Field(False, alias="inStock", examples=[True])

    model_config = {
        "populate_by_name": True,
    }

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ProductCreate(ProductBase):
    """Schema for creating a product.  Any ``id`` supplied is ignored."""

    id: Optional[int] = None


class ProductUpdate(ProductBase):
    """Schema for replacing a product's fields.

    ``name``, ``price`` and ``inStock`` are all overwritten; an ``id``
    in the body never changes the record's identifier.
    """

    id: Optional[int] = None


class ProductRead(ProductBase):
    """Schema for reading a product from the API."""

    id: int
