from sqlalchemy import Column, Integer, String, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship
from storefront.models.base import Base
from storefront.schemas.enums import PopularityEnum

class Country(Base):
    __tablename__ = "countries"
    __table_args__ = (
        Index("countries_name_idx", "name", unique=True),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(256))

    cities = relationship("City", back_populates="country", passive_deletes="all")


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True)
    name = Column(String(256))
    country_id = Column(Integer, ForeignKey("countries.id"))
    # Named type so Postgres gets CREATE TYPE popularity; other stores get a CHECK
    popularity = Column(
        Enum(
            PopularityEnum,
            name="popularity",
            create_constraint=True,
            values_callable=lambda members: [m.value for m in members],
        )
    )

    country = relationship("Country", back_populates="cities")
