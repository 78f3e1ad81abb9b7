"""
CookHub Backend — Schema Manager
==================================

What:  Brings the store from "a path on disk" to "ready to serve requests".
How:   Check/recover the file → connect (fatal on failure) → create each table
       if absent → optionally seed the demo dataset.
Who:   Called once from the application lifespan; tests call the individual
       steps against temporary files.

There are no migrations: tables are created with CREATE TABLE IF NOT EXISTS
semantics and existing tables are never altered.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

import cookhub.models  # noqa: F401  (registers all tables on Base.metadata)
from cookhub.config import Settings
from cookhub.database import Base, Store
from cookhub.seed import seed_database

logger = logging.getLogger(__name__)


async def create_tables(store: Store) -> List[str]:
    """
    Create every registered table that does not exist yet.

    Each table is created in its own transaction; a failure is logged and the
    remaining tables are still attempted.

    Returns:
        Names of the tables that exist after the call.
    """
    ready: List[str] = []
    for table in Base.metadata.sorted_tables:
        try:
            async with store.engine.begin() as conn:
                await conn.run_sync(table.create, checkfirst=True)
        except SQLAlchemyError as e:
            logger.error("Error creating table %s: %s", table.name, e)
            continue
        logger.info("Table %s ready", table.name)
        ready.append(table.name)
    return ready


async def initialize_store(config: Settings) -> Store:
    """
    Build, connect and prepare the Store described by `config`.

    Raises:
        StoreUnavailableError: the file could not be recovered or opened.
                               Startup must not continue.
    """
    store = Store(
        database_path=config.database_path,
        echo=config.db_echo,
        enforce_foreign_keys=config.enforce_foreign_keys,
    )

    if await store.prepare_file(recover=config.recover_corrupt_database):
        logger.warning("Recreating database from scratch at %s", config.database_path)

    await store.connect()
    await create_tables(store)

    if config.seed_on_startup:
        await seed_database(store)

    return store
