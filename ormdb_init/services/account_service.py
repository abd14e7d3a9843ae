"""
Account provisioning through the database user management commands.
"""
import logging
from typing import Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase

from ormdb_init.models.account import Account

logger = logging.getLogger(__name__)


class AccountService:
    """Service for database account operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the database the accounts are defined on."""
        self.db = db

    async def create_account(self, account: Account) -> None:
        """
        Create a database account with its role grants.

        Raises:
            pymongo.errors.OperationFailure: If the account already exists
                or the connection lacks user admin rights
        """
        await self.db.command(
            "createUser",
            account.username,
            pwd=account.password,
            roles=account.role_documents(),
        )

    async def account_exists(self, username: str) -> bool:
        """Check whether an account with this name exists on the database."""
        result = await self.db.command("usersInfo", username)
        return bool(result.get("users"))

    async def count_accounts(self) -> int:
        """Number of accounts defined on the database."""
        result = await self.db.command("usersInfo", 1)
        return len(result.get("users", []))


async def provision_accounts(
    db: AsyncIOMotorDatabase,
    accounts: Iterable[Account],
    skip_existing: bool = False,
) -> list[str]:
    """
    Create each account in order.

    Args:
        db: Database the accounts are defined on
        accounts: Accounts to create
        skip_existing: Skip accounts that already exist instead of failing

    Returns:
        Usernames of the accounts actually created
    """
    service = AccountService(db)
    created = []

    for account in accounts:
        if skip_existing and await service.account_exists(account.username):
            logger.info(f"Account '{account.username}' already exists, skipping")
            continue
        await service.create_account(account)
        roles = ", ".join(f"{g['role']}@{g['db']}" for g in account.role_documents())
        logger.info(f"Created account '{account.username}' with roles [{roles}]")
        created.append(account.username)

    return created
