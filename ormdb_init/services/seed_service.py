"""
Seed data loading for the products collection.
"""
import logging
from typing import Any, Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase

from ormdb_init.database.databases import orm_db
from ormdb_init.models.product import Product

logger = logging.getLogger(__name__)


def _validated(products: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    # Validate everything before the first write
    return [Product(**doc).model_dump() for doc in products]


async def insert_seed_products(
    db: AsyncIOMotorDatabase,
    products: Iterable[dict[str, Any]],
) -> list:
    """
    Insert seed products with a single insert_many call.

    No constraint covers these fields, so repeated calls insert duplicates.

    Returns:
        Inserted document ids

    Raises:
        pydantic.ValidationError: If a document is not a valid Product
    """
    docs = _validated(products)
    result = await db[orm_db.Collections.PRODUCTS].insert_many(docs)
    logger.info(f"Inserted {len(result.inserted_ids)} seed products")
    return list(result.inserted_ids)


async def upsert_seed_products(
    db: AsyncIOMotorDatabase,
    products: Iterable[dict[str, Any]],
) -> int:
    """
    Insert seed products that are not present yet, matched by name.

    Existing documents are left untouched.

    Returns:
        Number of newly inserted products
    """
    docs = _validated(products)
    collection = db[orm_db.Collections.PRODUCTS]
    inserted = 0

    for doc in docs:
        result = await collection.update_one(
            {"name": doc["name"]}, {"$setOnInsert": doc}, upsert=True
        )
        if result.upserted_id is not None:
            inserted += 1

    logger.info(
        f"Upserted seed products: {inserted} inserted, "
        f"{len(docs) - inserted} already present"
    )
    return inserted
