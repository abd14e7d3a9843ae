"""
Bootstrap services - account provisioning and seed data.
"""
from ormdb_init.services.account_service import AccountService, provision_accounts
from ormdb_init.services.seed_service import insert_seed_products, upsert_seed_products

__all__ = [
    "AccountService",
    "provision_accounts",
    "insert_seed_products",
    "upsert_seed_products",
]
