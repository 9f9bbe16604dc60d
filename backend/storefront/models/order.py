from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func, false
from storefront.models.base import Base

class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        Index("orders_store_idx", "store_id"),
    )

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id"))
    is_paid = Column(Boolean, default=False, server_default=false())
    phone = Column(String(32))
    address = Column(String(64), default="", server_default="")
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    store = relationship("Store", back_populates="orders")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )


class OrderItem(Base):
    """Join row between an order and one of the store's products."""
    __tablename__ = "order_items"
    __table_args__ = (
        Index("order_items_order_idx", "order_id"),
        Index("order_items_product_idx", "product_id"),
    )

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"))
    product_id = Column(Integer, ForeignKey("products.id"))

    order = relationship("Order", back_populates="order_items")
    product = relationship("Product", back_populates="order_items")
