"""
ORM benchmark database configuration.

Structure:
- users: user documents, unique by email
- orders: orders, queried by order date
- products: product catalog, queried by name (seeded with two examples)

Accounts:
- admin: owner of the database, read/write
- user: read/write only
"""
from pymongo import ASCENDING

from ormdb_init.models.account import Account, DatabaseRole, RoleGrant

class Collections:
    """Collection names in ormdb."""
    USERS = "users"
    ORDERS = "orders"
    PRODUCTS = "products"

    ALL = [USERS, ORDERS, PRODUCTS]

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", ASCENDING)], "unique": True},
        ],
        "orders": [
            {"keys": [("orderDate", ASCENDING)]},
        ],
        "products": [
            {"keys": [("name", ASCENDING)]},
        ],
    }


# Account templates: (username, password, roles). Grants are bound to the
# target database at bootstrap time.
ACCOUNT_TEMPLATES = [
    ("admin", "password", [DatabaseRole.DB_OWNER, DatabaseRole.READ_WRITE]),
    ("user", "password", [DatabaseRole.READ_WRITE]),
]

SEED_PRODUCTS = [
    {"name": "Example Product 1", "price": 10000, "description": "테스트 상품 1"},
    {"name": "Example Product 2", "price": 20000, "description": "테스트 상품 2"},
]


def build_accounts(db_name: str) -> list[Account]:
    """Build the bootstrap accounts with role grants on ``db_name``."""
    return [
        Account(
            username=username,
            password=password,
            roles=[RoleGrant(role=role, db=db_name) for role in roles],
        )
        for username, password, roles in ACCOUNT_TEMPLATES
    ]

