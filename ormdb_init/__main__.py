#!/usr/bin/env python3
"""
ormdb bootstrap entry point.

Usage:
    python -m ormdb_init

Environment Variables:
    MONGO_URI: MongoDB connection string (needs user admin rights)
    MONGO_DB_NAME: Database to bootstrap (default: ormdb)
    IDEMPOTENT_BOOTSTRAP: Skip/upsert existing entities (default: false)
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys

from ormdb_init.bootstrap import COMPLETION_MESSAGE, run_bootstrap, summarize
from ormdb_init.config import get_settings
from ormdb_init.database.connections import close_connections, get_database, get_mongo_client

logger = logging.getLogger("ormdb_init")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main() -> int:
    """Main entry point. Returns the process exit status."""
    settings = get_settings()

    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        logger.info("Connected to MongoDB")
    except Exception as e:
        logger.error(f"Could not connect to MongoDB: {e}")
        await close_connections()
        return 1

    try:
        db = await get_database(settings.mongo_db_name)
        try:
            await run_bootstrap(db, settings)
        except Exception:
            # Already logged with the failing step name
            return 1

        print(COMPLETION_MESSAGE)

        try:
            summary = await summarize(db)
        except Exception as e:
            logger.warning(f"Could not read back bootstrap summary: {e}")
        else:
            logger.info(
                f"Database '{summary.db_name}': {summary.accounts} accounts, "
                f"{len(summary.collections)} collections, {summary.indexes} indexes, "
                f"{summary.products} products"
            )
    finally:
        await close_connections()

    return 0


def run() -> None:
    """Console script entry point."""
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info("ormdb bootstrap")
    logger.info(f"Database: {settings.mongo_db_name}")
    logger.info(f"Idempotent: {settings.idempotent_bootstrap}")
    logger.info("=" * 60)

    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
