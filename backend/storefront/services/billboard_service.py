from storefront import models
from storefront.services.store_scoped_service import StoreScopedService

class BillboardService(StoreScopedService):
    model = models.Billboard

billboard_service = BillboardService()
