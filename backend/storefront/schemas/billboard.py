from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

class BillboardBase(BaseModel):
    label: str = Field(..., max_length=256)
    image_url: Optional[str] = Field(None, max_length=256)
    category_id: Optional[int] = None

class BillboardCreate(BillboardBase):
    pass

class BillboardUpdate(BaseModel):
    label: Optional[str] = Field(None, max_length=256)
    image_url: Optional[str] = Field(None, max_length=256)
    category_id: Optional[int] = None

    @field_validator("label")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("may not be null")
        return value

class Billboard(BillboardBase):
    id: int
    store_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
