"""
Models module initialization
"""

from .order import Order, OrderItem
from .product import Product, ProductType, utc_now

__all__ = [
    "Order",
    "OrderItem",
    "Product",
    "ProductType",
    "utc_now",
]
