from storefront import models
from storefront.services.store_scoped_service import StoreScopedService

class ImageService(StoreScopedService):
    """Read-only: images are written through their product (ProductService.create / update)."""
    model = models.Image
    scoped_through = "products"

    def create(self, db, store_id, obj_in):
        raise NotImplementedError("Images are created through their product")

    def update(self, db, db_obj, obj_in):
        raise NotImplementedError("Images are replaced through their product")

    def delete(self, db, db_obj):
        raise NotImplementedError("Images are removed through their product")

image_service = ImageService()
