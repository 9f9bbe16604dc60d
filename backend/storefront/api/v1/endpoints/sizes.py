from storefront import schemas
from storefront.api.v1.endpoints.scoped import build_scoped_router
from storefront.services import size_service

router = build_scoped_router(size_service, schemas.Size, schemas.SizeCreate, schemas.SizeUpdate, label="Size")
