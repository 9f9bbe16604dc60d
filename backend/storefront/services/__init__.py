from .user_service import user_service
from .store_service import store_service
from .billboard_service import billboard_service
from .category_service import category_service
from .size_service import size_service
from .color_service import color_service
from .product_service import product_service
from .image_service import image_service
from .order_service import order_service
from .country_service import country_service, city_service

__all__ = [
    "user_service",
    "store_service",
    "billboard_service",
    "category_service",
    "size_service",
    "color_service",
    "product_service",
    "image_service",
    "order_service",
    "country_service",
    "city_service",
]
