"""
Global test fixtures for ormdb-init.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- In-memory account catalog standing in for the user management commands
- Settings factories
"""

from unittest.mock import patch

import pytest
import pytest_asyncio
from pymongo.errors import OperationFailure

from ormdb_init.config import Settings


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_orm_db(mock_async_mongo_client):
    """Provide an empty mock ormdb database."""
    yield mock_async_mongo_client["ormdb"]


# =============================================================================
# Account Fixtures
# =============================================================================

class AccountCatalog:
    """
    In-memory stand-in for createUser / usersInfo.

    mongomock does not implement the user management commands, so tests
    patch AccountService with this catalog.
    """

    def __init__(self):
        self.users: dict[str, dict] = {}

    async def create_account(self, service, account):
        if account.username in self.users:
            raise OperationFailure(
                f"User \"{account.username}@{service.db.name}\" already exists",
                code=51003,
            )
        self.users[account.username] = {
            "user": account.username,
            "db": service.db.name,
            "roles": account.role_documents(),
        }

    async def account_exists(self, service, username):
        return username in self.users

    async def count_accounts(self, service):
        return len(self.users)


@pytest.fixture
def account_catalog():
    """
    Patch AccountService to use an in-memory account catalog.

    Usage:
        async def test_something(account_catalog, mock_orm_db):
            await provision_accounts(mock_orm_db, accounts)
            assert "admin" in account_catalog.users
    """
    catalog = AccountCatalog()

    async def _create(self, account):
        await catalog.create_account(self, account)

    async def _exists(self, username):
        return await catalog.account_exists(self, username)

    async def _count(self):
        return await catalog.count_accounts(self)

    target = "ormdb_init.services.account_service.AccountService"
    with patch(f"{target}.create_account", _create), \
         patch(f"{target}.account_exists", _exists), \
         patch(f"{target}.count_accounts", _count):
        yield catalog


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def default_settings() -> Settings:
    """Settings where a rerun fails on existing entities."""
    return Settings(_env_file=None, idempotent_bootstrap=False)


@pytest.fixture
def idempotent_settings() -> Settings:
    """Settings with check-then-create / upsert behavior."""
    return Settings(_env_file=None, idempotent_bootstrap=True)


@pytest.fixture
def seed_product_data() -> list[dict]:
    """Seed product documents as inserted by the bootstrap."""
    return [
        {"name": "Example Product 1", "price": 10000, "description": "테스트 상품 1"},
        {"name": "Example Product 2", "price": 20000, "description": "테스트 상품 2"},
    ]
