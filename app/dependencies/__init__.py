"""
Dependency providers
"""

from .services import (
    get_order_repository,
    get_order_service,
    get_product_repository,
    get_product_service,
)

__all__ = [
    "get_order_repository",
    "get_order_service",
    "get_product_repository",
    "get_product_service",
]
