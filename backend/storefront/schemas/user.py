from pydantic import BaseModel
from typing import Optional

class UserBase(BaseModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None

class UserCreate(UserBase):
    pass

class User(UserBase):
    id: int

    class Config:
        from_attributes = True
