"""
Product model for the ormdb.products collection.
"""
from pydantic import BaseModel, Field


class Product(BaseModel):
    """
    Product document model for MongoDB ormdb.products collection.
    """
    name: str = Field(..., min_length=1, description="Product name")
    price: int = Field(..., ge=0, description="Price in won")
    description: str = Field("", description="Product description")
