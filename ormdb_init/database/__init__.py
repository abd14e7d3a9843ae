"""
Database module - MongoDB connection, database definitions and schema setup.
"""
from ormdb_init.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from ormdb_init.database.databases import orm_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "orm_db",
]
