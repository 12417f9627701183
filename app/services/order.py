"""
Order service
"""

from typing import Optional

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.order import Order
from app.repositories.order import OrderRepository
from app.services.product import ProductService


class OrderService:

    def __init__(self, repository: OrderRepository, product_service: ProductService):
        self.repository = repository
        self.product_service = product_service

    async def get_order(self, order_id: int) -> Optional[Order]:
        return await self.repository.get_with_products(order_id)

    async def process_order(self, order_id: int) -> int:
        """Run the stock rules for every line of an order"""
        order = await self.get_order(order_id)
        if order is None:
            raise ErrorResponse("Order not found", status_code=404, details={"order_id": order_id})

        await self.product_service.process_products(order.items)

        logger.info(
            f"Processed order {order_id}",
            metadata={"event": "process_order", "order_id": order_id, "items": len(order.items)}
        )
        return order.id
