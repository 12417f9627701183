"""
Services module initialization
"""

from .notifications import NotificationPort, NotificationService
from .order import OrderService
from .product import ProductService

__all__ = [
    "NotificationPort",
    "NotificationService",
    "OrderService",
    "ProductService",
]
