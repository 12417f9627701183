"""
Customer notification port
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from app.core.logger import logger


class NotificationPort(ABC):
    """Notifications the stock rules can emit. Calls are fire-and-forget."""

    @abstractmethod
    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        ...

    @abstractmethod
    def send_out_of_stock_notification(self, product_name: str) -> None:
        ...

    @abstractmethod
    def send_expiration_notification(self, product_name: str, expiry_date: Optional[datetime]) -> None:
        ...


class NotificationService(NotificationPort):
    """Records every notification as a business event in the service log"""

    def send_delay_notification(self, lead_time: int, product_name: str) -> None:
        logger.business_event(
            "product.delayed",
            entity_type="product",
            entity_id=product_name,
            metadata={"product_name": product_name, "lead_time_days": lead_time},
        )

    def send_out_of_stock_notification(self, product_name: str) -> None:
        logger.business_event(
            "product.out_of_stock",
            entity_type="product",
            entity_id=product_name,
            metadata={"product_name": product_name},
        )

    def send_expiration_notification(self, product_name: str, expiry_date: Optional[datetime]) -> None:
        logger.business_event(
            "product.expired",
            entity_type="product",
            entity_id=product_name,
            metadata={
                "product_name": product_name,
                "expiry_date": expiry_date.isoformat() if expiry_date else None,
            },
        )
