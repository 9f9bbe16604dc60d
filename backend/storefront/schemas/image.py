from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class Image(BaseModel):
    id: int
    product_id: int
    url: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
