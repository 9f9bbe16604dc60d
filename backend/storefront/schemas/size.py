from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

class SizeBase(BaseModel):
    name: str = Field(..., max_length=256)
    value: str = Field(..., max_length=256)

class SizeCreate(SizeBase):
    pass

class SizeUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=256)
    value: Optional[str] = Field(None, max_length=256)

    @field_validator("name", "value")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value

class Size(SizeBase):
    id: int
    store_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
