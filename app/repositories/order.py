"""
Order repository
"""

from typing import List, Optional

from pymongo.errors import PyMongoError
from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.models.order import Order, OrderItem
from app.models.product import Product


class OrderRepository:
    """
    Orders are stored as {_id, items: [{product_id, quantity}]} and joined
    with the products collection on read.
    """

    def __init__(self, collection: AsyncIOMotorCollection, products_collection: str = "products"):
        self.collection = collection
        self.products_collection = products_collection

    def _pipeline(self, order_id: int) -> List[dict]:
        return [
            {"$match": {"_id": order_id}},
            {"$lookup": {
                "from": self.products_collection,
                "localField": "items.product_id",
                "foreignField": "_id",
                "as": "products",
            }},
            {"$limit": 1},
        ]

    def _doc_to_order(self, doc: dict) -> Order:
        products = {p["_id"]: Product.from_document(p) for p in doc.get("products", [])}
        items = []
        for line in doc.get("items", []):
            product = products.get(line["product_id"])
            if product is None:
                logger.warning(
                    f"Order {doc['_id']} references missing product {line['product_id']}",
                    metadata={"order_id": doc["_id"], "product_id": line["product_id"]}
                )
                continue
            items.append(OrderItem(product=product, quantity=line.get("quantity", 1)))
        return Order(id=doc["_id"], items=items)

    async def get_with_products(self, order_id: int) -> Optional[Order]:
        """Fetch an order and the products of its lines in one query"""
        try:
            cursor = self.collection.aggregate(self._pipeline(order_id))
            docs = await cursor.to_list(length=1)
        except PyMongoError as e:
            logger.error(f"MongoDB error getting order: {e}", error=e)
            raise ErrorResponse("Database error during order retrieval", status_code=503)

        return self._doc_to_order(docs[0]) if docs else None

    async def create(self, order_id: int, items: List[dict]) -> int:
        """Insert an order from [{product_id, quantity}] lines"""
        try:
            await self.collection.insert_one({"_id": order_id, "items": items})
            return order_id
        except PyMongoError as e:
            logger.error(f"MongoDB error creating order: {e}", error=e)
            raise ErrorResponse("Database error during order creation", status_code=503)
