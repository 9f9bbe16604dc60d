from storefront import schemas
from storefront.api.v1.endpoints.scoped import build_scoped_router
from storefront.services import color_service

router = build_scoped_router(color_service, schemas.Color, schemas.ColorCreate, schemas.ColorUpdate, label="Color")
