"""
Bootstrap summary model.
"""
from pydantic import BaseModel, Field


class BootstrapSummary(BaseModel):
    """Counts of what the bootstrap left in the database."""
    db_name: str
    accounts: int = Field(0, ge=0, description="Accounts defined on the database")
    collections: list[str] = Field(default_factory=list)
    indexes: int = Field(0, ge=0, description="Secondary indexes, excluding _id")
    products: int = Field(0, ge=0, description="Documents in the products collection")
