"""
Document models for the bootstrap.
"""
from ormdb_init.models.account import Account, DatabaseRole, RoleGrant
from ormdb_init.models.product import Product
from ormdb_init.models.summary import BootstrapSummary

__all__ = [
    "Account",
    "DatabaseRole",
    "RoleGrant",
    "Product",
    "BootstrapSummary",
]
