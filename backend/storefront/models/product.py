from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Boolean, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, false
from storefront.models.base import Base

class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("products_store_idx", "store_id"),
        Index("products_category_idx", "category_id"),
        Index("products_size_idx", "size_id"),
        Index("products_color_idx", "color_id"),
    )

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id"))
    category_id = Column(Integer, ForeignKey("categories.id"))
    name = Column(String(256))
    price = Column(Numeric(100, 20))
    is_featured = Column(Boolean)
    is_archived = Column(Boolean, default=False, server_default=false())
    size_id = Column(Integer, ForeignKey("sizes.id"))
    color_id = Column(Integer, ForeignKey("colors.id"))
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    store = relationship("Store", back_populates="products")
    category = relationship("Category", back_populates="products")
    size = relationship("Size", back_populates="products")
    color = relationship("Color", back_populates="products")
    images = relationship(
        "Image",
        back_populates="product",
        order_by="Image.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    order_items = relationship("OrderItem", back_populates="product", passive_deletes="all")
