"""
Builders for the repository -> service chains.
Each function also works as a FastAPI Depends provider.
"""

from app.core.config import config
from app.db.mongodb import get_orders_collection, get_products_collection
from app.repositories.order import OrderRepository
from app.repositories.product import ProductRepository
from app.services.notifications import NotificationService
from app.services.order import OrderService
from app.services.product import ProductService


async def get_product_repository() -> ProductRepository:
    collection = await get_products_collection()
    return ProductRepository(collection)


async def get_order_repository() -> OrderRepository:
    collection = await get_orders_collection()
    return OrderRepository(collection, products_collection=config.products_collection)


async def get_product_service() -> ProductService:
    return ProductService(await get_product_repository(), NotificationService())


async def get_order_service() -> OrderService:
    return OrderService(await get_order_repository(), await get_product_service())
