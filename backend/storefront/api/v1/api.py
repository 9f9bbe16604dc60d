from fastapi import APIRouter, Depends
from storefront.api.v1.endpoints import (
    billboards,
    categories,
    colors,
    countries,
    images,
    orders,
    products,
    schema,
    sizes,
    store,
    stores,
    users,
)
from storefront.core.security import get_current_identity

# Identity is checked before any handler or database dependency runs
api_router = APIRouter(dependencies=[Depends(get_current_identity)])
api_router.include_router(store.router, prefix="/store", tags=["store"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(stores.router, prefix="/stores", tags=["stores"])
api_router.include_router(billboards.router, prefix="/stores/{store_id}/billboards", tags=["billboards"])
api_router.include_router(categories.router, prefix="/stores/{store_id}/categories", tags=["categories"])
api_router.include_router(sizes.router, prefix="/stores/{store_id}/sizes", tags=["sizes"])
api_router.include_router(colors.router, prefix="/stores/{store_id}/colors", tags=["colors"])
api_router.include_router(products.router, prefix="/stores/{store_id}/products", tags=["products"])
api_router.include_router(images.router, prefix="/stores/{store_id}/images", tags=["images"])
api_router.include_router(orders.router, prefix="/stores/{store_id}/orders", tags=["orders"])
api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
api_router.include_router(countries.cities_router, prefix="/cities", tags=["cities"])
api_router.include_router(schema.router, prefix="/schema", tags=["schema"])
