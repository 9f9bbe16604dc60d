from storefront import models
from storefront.services.store_scoped_service import StoreScopedService

class SizeService(StoreScopedService):
    model = models.Size

size_service = SizeService()
