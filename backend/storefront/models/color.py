from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.models.base import Base

class Color(Base):
    __tablename__ = "colors"
    __table_args__ = (
        Index("colors_store_idx", "store_id"),
    )

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id"))
    name = Column(String(256))
    value = Column(String(256))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    store = relationship("Store", back_populates="colors")
    products = relationship("Product", back_populates="color", passive_deletes="all")
