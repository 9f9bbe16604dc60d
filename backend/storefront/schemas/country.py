from pydantic import BaseModel, Field
from typing import Optional
from .enums import PopularityEnum

class CountryBase(BaseModel):
    name: str = Field(..., max_length=256)

class CountryCreate(CountryBase):
    pass

class Country(CountryBase):
    id: int

    class Config:
        from_attributes = True


class CityBase(BaseModel):
    name: str = Field(..., max_length=256)
    country_id: Optional[int] = None
    popularity: Optional[PopularityEnum] = None

class CityCreate(CityBase):
    pass

class City(CityBase):
    id: int

    class Config:
        from_attributes = True
