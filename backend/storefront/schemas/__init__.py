# storefront/schemas/__init__.py

from .enums import PopularityEnum
from .user import User, UserCreate
from .country import Country, CountryCreate, City, CityCreate
from .store import Store, StoreCreate, StoreUpdate
from .billboard import Billboard, BillboardCreate, BillboardUpdate
from .category import Category, CategoryCreate, CategoryUpdate
from .size import Size, SizeCreate, SizeUpdate
from .color import Color, ColorCreate, ColorUpdate
from .image import Image
from .product import Product, ProductCreate, ProductUpdate
from .order import Order, OrderCreate, OrderUpdate, OrderItem
from .table_info import TableInfo, ColumnInfo, IndexInfo, ForeignKeyEdge

__all__ = [
    "PopularityEnum",
    "User", "UserCreate",
    "Country", "CountryCreate", "City", "CityCreate",
    "Store", "StoreCreate", "StoreUpdate",
    "Billboard", "BillboardCreate", "BillboardUpdate",
    "Category", "CategoryCreate", "CategoryUpdate",
    "Size", "SizeCreate", "SizeUpdate",
    "Color", "ColorCreate", "ColorUpdate",
    "Image",
    "Product", "ProductCreate", "ProductUpdate",
    "Order", "OrderCreate", "OrderUpdate", "OrderItem",
    "TableInfo", "ColumnInfo", "IndexInfo", "ForeignKeyEdge",
]
