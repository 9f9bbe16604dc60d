from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.models.base import Base

class Billboard(Base):
    __tablename__ = "billboards"
    __table_args__ = (
        Index("billboards_store_idx", "store_id"),
    )

    id = Column(Integer, primary_key=True)
    store_id = Column(Integer, ForeignKey("stores.id"))
    label = Column(String(256))
    image_url = Column(String(256))
    # categories.billboard_id points back here, so this side is added after both tables exist
    category_id = Column(
        Integer,
        ForeignKey("categories.id", use_alter=True, name="billboards_category_id_fkey"),
    )
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, onupdate=func.now())

    store = relationship("Store", back_populates="billboards")
    categories = relationship(
        "Category",
        back_populates="billboard",
        foreign_keys="Category.billboard_id",
        passive_deletes="all",
    )
    category = relationship("Category", foreign_keys=[category_id], post_update=True)
