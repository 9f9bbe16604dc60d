from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

class OrderItem(BaseModel):
    id: int
    order_id: int
    product_id: int

    class Config:
        from_attributes = True

class OrderBase(BaseModel):
    phone: Optional[str] = Field(None, max_length=32)
    address: str = Field("", max_length=64)
    is_paid: bool = False

class OrderCreate(OrderBase):
    product_ids: List[int] = []

class OrderUpdate(BaseModel):
    phone: Optional[str] = Field(None, max_length=32)
    address: Optional[str] = Field(None, max_length=64)
    is_paid: Optional[bool] = None

    @field_validator("address", "is_paid")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value

class Order(OrderBase):
    id: int
    store_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    order_items: List[OrderItem] = []

    class Config:
        from_attributes = True
