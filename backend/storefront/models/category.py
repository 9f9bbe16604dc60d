from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.models.base import Base

class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (
        Index("categories_store_idx", "store_id"),
        Index("categories_billboard_idx", "billboard_id"),
    )

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id"))
    billboard_id = Column(Integer, ForeignKey("billboards.id"))
    name = Column(String(256))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    store = relationship("Store", back_populates="categories")
    billboard = relationship("Billboard", back_populates="categories", foreign_keys=[billboard_id])
    products = relationship("Product", back_populates="category", passive_deletes="all")
