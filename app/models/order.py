"""
Order models
"""

from typing import List

from pydantic import BaseModel, Field

from app.models.product import Product


class OrderItem(BaseModel):
    """One order line with the full product it refers to"""
    product: Product
    quantity: int = Field(default=1, ge=1)


class Order(BaseModel):
    id: int
    items: List[OrderItem] = Field(default_factory=list)
