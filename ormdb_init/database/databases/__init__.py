"""
Database definitions and collection constants.
"""
from ormdb_init.database.databases import orm_db

__all__ = ["orm_db"]
