"""
Product service: per-type stock rules applied when an order is processed
"""

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, Dict, Iterable

from app.core.errors import InvalidProductError
from app.core.logger import logger
from app.models.order import OrderItem
from app.models.product import Product, ProductType, utc_now
from app.repositories.product import ProductRepository
from app.services.notifications import NotificationPort


SECONDS_PER_DAY = 24 * 60 * 60

ProductHandler = Callable[[Product], Awaitable[None]]


def _type_name(product: Product) -> str:
    return getattr(product.type, "value", product.type)


def _required(product: Product, field: str) -> datetime:
    value = getattr(product, field)
    if value is None:
        raise InvalidProductError(product.id, field, _type_name(product))
    return value


class ProductService:
    """Decides, per product type, whether to sell, notify or flag a product"""

    def __init__(self, repository: ProductRepository, notifications: NotificationPort):
        self.repository = repository
        self.notifications = notifications
        self.handlers: Dict[ProductType, ProductHandler] = {
            ProductType.NORMAL: self.handle_normal_product,
            ProductType.SEASONAL: self.handle_seasonal_product,
            ProductType.EXPIRABLE: self.handle_expired_product,
            ProductType.FLASHSALE: self.handle_flash_sale_product,
        }

    async def process_products(self, items: Iterable[OrderItem]) -> None:
        """Apply the matching stock rule to every order line concurrently"""
        results = await asyncio.gather(
            *(self._process_item(item) for item in items),
            return_exceptions=True,
        )
        # Every line has finished its write before the first failure surfaces
        for result in results:
            if isinstance(result, BaseException):
                raise result

    async def _process_item(self, item: OrderItem) -> None:
        product = item.product
        handler = self.handlers.get(product.type)
        if handler is None:
            logger.warning(
                f"No stock rule for product type {_type_name(product)}",
                metadata={"event": "unknown_product_type", "product_id": product.id, "type": _type_name(product)}
            )
            return
        await handler(product)

    async def update_product(self, product: Product) -> None:
        await self.repository.update(product)
        logger.debug(
            f"Updated product {product.id}",
            metadata={"event": "update_product", "product_id": product.id, "available": product.available}
        )

    async def _sell_one(self, product: Product) -> None:
        await self.update_product(product.model_copy(update={"available": product.available - 1}))

    async def _mark_out_of_stock(self, product: Product) -> None:
        await self.update_product(product.model_copy(update={"available": 0}))

    async def notify_delay(self, lead_time: int, product: Product) -> None:
        """Record the lead time on the product and tell the customer about the delay"""
        product.lead_time = lead_time
        await self.update_product(product)
        self.notifications.send_delay_notification(lead_time, product.name)

    async def handle_normal_product(self, product: Product) -> None:
        if product.available > 0:
            await self._sell_one(product)
        elif product.lead_time > 0:
            await self.notify_delay(product.lead_time, product)

    async def handle_seasonal_product(self, product: Product) -> None:
        """
        In season with stock: sell one.
        Restock would land after the season ends: out of stock for good.
        Season not started yet: out of stock, record left as is.
        Otherwise the customer waits for the restock lead time.
        """
        start = _required(product, "season_start_date")
        end = _required(product, "season_end_date")
        now = utc_now()

        if start < now < end and product.available > 0:
            await self._sell_one(product)
        elif (end - now).total_seconds() < product.lead_time * SECONDS_PER_DAY:
            self.notifications.send_out_of_stock_notification(product.name)
            await self._mark_out_of_stock(product)
        elif start > now:
            self.notifications.send_out_of_stock_notification(product.name)
            await self.update_product(product)
        else:
            await self.notify_delay(product.lead_time, product)

    async def handle_expired_product(self, product: Product) -> None:
        expiry = _required(product, "expiry_date")

        if product.available > 0 and expiry > utc_now():
            await self._sell_one(product)
        else:
            self.notifications.send_expiration_notification(product.name, expiry)
            await self._mark_out_of_stock(product)

    async def handle_flash_sale_product(self, product: Product) -> None:
        start = _required(product, "flash_sale_start_date")
        end = _required(product, "flash_sale_end_date")
        now = utc_now()

        if start < now < end and product.available > 0:
            await self._sell_one(product)
        elif now > end:
            self.notifications.send_out_of_stock_notification(product.name)
            await self._mark_out_of_stock(product)
