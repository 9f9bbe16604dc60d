from storefront import schemas
from storefront.api.v1.endpoints.scoped import build_scoped_router
from storefront.services import billboard_service, category_service

router = build_scoped_router(
    category_service,
    schemas.Category,
    schemas.CategoryCreate,
    schemas.CategoryUpdate,
    label="Category",
    references={"billboard_id": (billboard_service, "Billboard")},
)
