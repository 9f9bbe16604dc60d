from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

class StoreBase(BaseModel):
    name: str = Field(..., max_length=256)
    user_id: Optional[int] = None

class StoreCreate(StoreBase):
    pass

class StoreUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=256)
    user_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value

class Store(StoreBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
