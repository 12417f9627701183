"""
Repositories module initialization
"""

from .order import OrderRepository
from .product import ProductRepository

__all__ = [
    "OrderRepository",
    "ProductRepository",
]
