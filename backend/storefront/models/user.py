from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from storefront.models.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    full_name = Column(Text)
    phone = Column(String(256))

    stores = relationship("Store", back_populates="user", passive_deletes="all")
