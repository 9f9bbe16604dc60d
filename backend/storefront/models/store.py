from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.models.base import Base

class Store(Base):
    __tablename__ = "stores"
    __table_args__ = (
        Index("stores_user_idx", "user_id"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(256))
    user_id = Column(Integer, ForeignKey("users.id"))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    user = relationship("User", back_populates="stores")
    billboards = relationship("Billboard", back_populates="store", passive_deletes="all")
    categories = relationship("Category", back_populates="store", passive_deletes="all")
    products = relationship("Product", back_populates="store", passive_deletes="all")
    sizes = relationship("Size", back_populates="store", passive_deletes="all")
    colors = relationship("Color", back_populates="store", passive_deletes="all")
    orders = relationship("Order", back_populates="store", passive_deletes="all")
