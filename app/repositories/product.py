"""
Product repository: the persistence port for stock decisions
"""

from typing import Optional

from pymongo.errors import PyMongoError
from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.product import Product


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        try:
            doc = await self.collection.find_one({"_id": product_id})
            return Product.from_document(doc) if doc else None

        except PyMongoError as e:
            logger.error(f"MongoDB error getting product: {e}", error=e)
            raise ErrorResponse("Database error during product retrieval", status_code=503)

    async def create(self, product: Product) -> Product:
        """Insert a new product record"""
        try:
            await self.collection.insert_one(product.to_document())
            return product

        except PyMongoError as e:
            logger.error(f"MongoDB error creating product: {e}", error=e)
            raise ErrorResponse("Database error during product creation", status_code=503)

    async def update(self, product: Product) -> bool:
        """
        Overwrite the stored record with the given product.

        Returns:
            True when a document with the product's id exists
        """
        doc = product.to_document()
        doc.pop("_id")
        try:
            result = await self.collection.update_one(
                {"_id": product.id},
                {"$set": doc}
            )
        except PyMongoError as e:
            logger.error(
                f"MongoDB error updating product: {e}",
                error=e,
                metadata={"product_id": product.id}
            )
            raise ErrorResponse("Database error during product update", status_code=503)

        if result.matched_count == 0:
            logger.warning(
                f"Product {product.id} not found for update",
                metadata={"event": "update_product_missing", "product_id": product.id}
            )
            return False

        return True
