"""
Bootstrap routine for the ormdb database.

Runs each setup step in order against a single database handle:
accounts, collections, indexes, seed products. The first failing step
aborts the run; nothing is rolled back.
"""
import logging
from typing import Awaitable, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from ormdb_init.config import Settings, get_settings
from ormdb_init.database.databases import orm_db
from ormdb_init.database.schema import count_indexes, create_collections, create_indexes
from ormdb_init.models.summary import BootstrapSummary
from ormdb_init.services.account_service import AccountService, provision_accounts
from ormdb_init.services.seed_service import insert_seed_products, upsert_seed_products

logger = logging.getLogger(__name__)

COMPLETION_MESSAGE = "MongoDB initialization complete"


async def _run_step(name: str, step: Callable[[], Awaitable]) -> None:
    logger.info(f"Bootstrap step '{name}' started")
    try:
        await step()
    except Exception as e:
        logger.error(f"Bootstrap step '{name}' failed: {e}")
        raise
    logger.info(f"Bootstrap step '{name}' done")


async def run_bootstrap(
    db: AsyncIOMotorDatabase,
    settings: Optional[Settings] = None,
) -> None:
    """
    Create accounts, collections, indexes and seed products on ``db``.

    With settings.idempotent_bootstrap, existing accounts and collections
    are skipped and seed products are upserted by name, so reruns leave the
    database unchanged. Otherwise a rerun fails at the first step.
    """
    settings = settings or get_settings()
    idempotent = settings.idempotent_bootstrap
    accounts = orm_db.build_accounts(db.name)

    async def accounts_step():
        await provision_accounts(db, accounts, skip_existing=idempotent)

    async def collections_step():
        await create_collections(db, orm_db.Collections.ALL, skip_existing=idempotent)

    async def indexes_step():
        await create_indexes(db, orm_db.Collections.INDEXES)

    async def seed_step():
        if idempotent:
            await upsert_seed_products(db, orm_db.SEED_PRODUCTS)
        else:
            await insert_seed_products(db, orm_db.SEED_PRODUCTS)

    await _run_step("accounts", accounts_step)
    await _run_step("collections", collections_step)
    await _run_step("indexes", indexes_step)
    await _run_step("seed", seed_step)


async def summarize(db: AsyncIOMotorDatabase) -> BootstrapSummary:
    """Read back what the bootstrap left in ``db``."""
    collections = sorted(
        name for name in await db.list_collection_names()
        if not name.startswith("system.")
    )
    return BootstrapSummary(
        db_name=db.name,
        accounts=await AccountService(db).count_accounts(),
        collections=collections,
        indexes=await count_indexes(db, orm_db.Collections.ALL),
        products=await db[orm_db.Collections.PRODUCTS].count_documents({}),
    )
