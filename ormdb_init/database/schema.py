"""
Collection and index setup.
Creates the collections of a database and the indexes declared for them.
"""
import logging
from typing import Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


async def create_collections(
    db: AsyncIOMotorDatabase,
    names: Iterable[str],
    skip_existing: bool = False,
) -> list[str]:
    """
    Create each named collection in order.

    Args:
        db: Target database
        names: Collection names to create
        skip_existing: Skip collections that already exist instead of failing

    Returns:
        Names of the collections actually created

    Raises:
        pymongo.errors.CollectionInvalid: If a collection exists and
            skip_existing is False
    """
    existing = set(await db.list_collection_names()) if skip_existing else set()
    created = []

    for name in names:
        if name in existing:
            logger.info(f"Collection '{name}' already exists, skipping")
            continue
        await db.create_collection(name)
        logger.info(f"Created collection '{name}'")
        created.append(name)

    return created


async def create_indexes(
    db: AsyncIOMotorDatabase,
    index_defs: dict[str, list[dict]],
) -> list[str]:
    """
    Create indexes for database collections.

    Each definition is a dict with a "keys" list of (field, direction)
    pairs; any other entries are passed to create_index as options.
    Creating an index that already exists with the same options is a no-op
    on the server.

    Returns:
        Names of the created indexes, in definition order
    """
    index_names = []

    for collection_name, indexes in index_defs.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            name = await collection.create_index(keys, **kwargs)
            logger.info(f"Ensured index '{name}' on '{collection_name}'")
            index_names.append(name)

    return index_names


async def count_indexes(db: AsyncIOMotorDatabase, collection_names: Iterable[str]) -> int:
    """Count secondary indexes (everything but _id) on the given collections."""
    existing = set(await db.list_collection_names())
    total = 0
    for name in collection_names:
        if name not in existing:
            continue
        info = await db[name].index_information()
        total += sum(1 for index_name in info if index_name != "_id_")
    return total
