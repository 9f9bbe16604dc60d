from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from .image import Image

class ProductBase(BaseModel):
    name: str = Field(..., max_length=256)
    price: Decimal
    category_id: Optional[int] = None
    size_id: Optional[int] = None
    color_id: Optional[int] = None
    is_featured: Optional[bool] = False
    is_archived: Optional[bool] = False

class ProductCreate(ProductBase):
    images: List[str] = []

class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=256)
    price: Optional[Decimal] = None
    category_id: Optional[int] = None
    size_id: Optional[int] = None
    color_id: Optional[int] = None
    is_featured: Optional[bool] = None
    is_archived: Optional[bool] = None
    # Replaces the whole image set when given
    images: Optional[List[str]] = None

    @field_validator("name", "price", "is_archived")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value

class Product(ProductBase):
    id: int
    store_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    images: List[Image] = []

    class Config:
        from_attributes = True
