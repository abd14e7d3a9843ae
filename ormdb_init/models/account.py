"""
Database account model.
"""
from enum import Enum

from pydantic import BaseModel, Field


class DatabaseRole(str, Enum):
    """Built-in MongoDB roles granted by the bootstrap."""
    DB_OWNER = "dbOwner"
    READ_WRITE = "readWrite"


class RoleGrant(BaseModel):
    """A role granted on a specific database."""
    role: DatabaseRole = Field(..., description="Built-in role name")
    db: str = Field(..., description="Database the role applies to")

    class Config:
        use_enum_values = True


class Account(BaseModel):
    """
    Credentialed account stored in the database's user catalog.
    """
    username: str = Field(..., min_length=1, description="Account name")
    password: str = Field(..., min_length=1, description="Plain password, hashed by the server")
    roles: list[RoleGrant] = Field(
        default_factory=list,
        description="Roles granted to the account"
    )

    def role_documents(self) -> list[dict]:
        """Roles in the shape expected by the createUser command."""
        return [grant.model_dump() for grant in self.roles]
