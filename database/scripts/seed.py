#!/usr/bin/env python3

import asyncio
import sys
from datetime import timedelta
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv

load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient

from app.core.config import config
from app.models.product import Product, ProductType, utc_now


def sample_products():
    """One product per rule branch worth trying by hand"""
    now = utc_now()
    return [
        Product(id=1, name="USB Cable", type=ProductType.NORMAL, available=30, lead_time=15),
        Product(id=2, name="USB Dongle", type=ProductType.NORMAL, available=0, lead_time=10),
        Product(id=3, name="Butter", type=ProductType.EXPIRABLE, available=30, lead_time=15,
                expiry_date=now + timedelta(days=26)),
        Product(id=4, name="Milk", type=ProductType.EXPIRABLE, available=0, lead_time=90,
                expiry_date=now - timedelta(days=2)),
        Product(id=5, name="Watermelon", type=ProductType.SEASONAL, available=30, lead_time=15,
                season_start_date=now - timedelta(days=2), season_end_date=now + timedelta(days=58)),
        Product(id=6, name="Grapes", type=ProductType.SEASONAL, available=30, lead_time=15,
                season_start_date=now + timedelta(days=180), season_end_date=now + timedelta(days=240)),
        Product(id=7, name="Headphones", type=ProductType.FLASHSALE, available=5, lead_time=0,
                flash_sale_start_date=now - timedelta(hours=1), flash_sale_end_date=now + timedelta(hours=5)),
        Product(id=8, name="Smart Watch", type=ProductType.FLASHSALE, available=5, lead_time=0,
                flash_sale_start_date=now - timedelta(days=3), flash_sale_end_date=now - timedelta(days=1)),
    ]


class InventoryDatabaseSeeder:
    def __init__(self):
        self.client = None
        self.db = None

    async def connect(self):
        """Establish MongoDB connection"""
        print(f"Connecting to MongoDB database '{config.mongodb_database}'...")
        self.client = AsyncIOMotorClient(config.mongodb_url)
        self.db = self.client[config.mongodb_database]

        await self.db.command('ping')
        print("Successfully connected to MongoDB!")

    async def seed_data(self):
        """Main seeding method"""
        print("Seeding inventory data...")

        try:
            await self.clear_data()
            await self.seed_products()
            await self.seed_orders()
            print("Inventory data seeding completed successfully!")
        except Exception as error:
            print(f"Error seeding inventory data: {error}")
            raise

    async def clear_data(self):
        """Clear existing products and orders"""
        for name in (config.products_collection, config.orders_collection):
            result = await self.db[name].delete_many({})
            print(f"Deleted {result.deleted_count} documents from '{name}'")

    async def seed_products(self):
        docs = [p.to_document() for p in sample_products()]
        result = await self.db[config.products_collection].insert_many(docs)
        print(f"Inserted {len(result.inserted_ids)} products")

    async def seed_orders(self):
        orders = [
            {"_id": 1, "items": [{"product_id": pid, "quantity": 1} for pid in (1, 2, 3, 4, 5, 6, 7, 8)]},
            {"_id": 2, "items": [{"product_id": 1, "quantity": 2}, {"product_id": 7, "quantity": 1}]},
        ]
        result = await self.db[config.orders_collection].insert_many(orders)
        print(f"Inserted {len(result.inserted_ids)} orders")

    async def close(self):
        if self.client:
            self.client.close()


async def main():
    seeder = InventoryDatabaseSeeder()
    try:
        await seeder.connect()
        await seeder.seed_data()
    finally:
        await seeder.close()


if __name__ == "__main__":
    asyncio.run(main())
