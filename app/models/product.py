"""
Product model and product type catalogue
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    """Current UTC time; the single clock every stock rule reads"""
    return datetime.now(timezone.utc)


class ProductType(str, Enum):
    """Stock rule families a product can belong to"""
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"
    FLASHSALE = "FLASHSALE"


class Product(BaseModel):
    """Product stock record as stored in the products collection"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    # Unknown types are kept as plain strings so they can be skipped, not rejected
    type: Union[ProductType, str] = ProductType.NORMAL
    available: int = Field(default=0, ge=0)
    lead_time: int = Field(default=0, ge=0, alias="leadTime")  # days

    expiry_date: Optional[datetime] = Field(None, alias="expiryDate")
    season_start_date: Optional[datetime] = Field(None, alias="seasonStartDate")
    season_end_date: Optional[datetime] = Field(None, alias="seasonEndDate")
    flash_sale_start_date: Optional[datetime] = Field(None, alias="flashSaleStartDate")
    flash_sale_end_date: Optional[datetime] = Field(None, alias="flashSaleEndDate")

    @field_validator("type")
    @classmethod
    def known_type(cls, value: Union[ProductType, str]) -> Union[ProductType, str]:
        try:
            return ProductType(value)
        except ValueError:
            return value

    @field_validator(
        "expiry_date",
        "season_start_date",
        "season_end_date",
        "flash_sale_start_date",
        "flash_sale_end_date",
    )
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # MongoDB hands back naive datetimes that are UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_document(self) -> dict:
        """Serialize to a MongoDB document keyed by _id"""
        doc = self.model_dump(exclude={"id"})
        if isinstance(self.type, ProductType):
            doc["type"] = self.type.value
        doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: dict) -> "Product":
        data = dict(doc)
        data["id"] = data.pop("_id")
        return cls(**data)
