from storefront import models
from storefront.services.store_scoped_service import StoreScopedService

class ColorService(StoreScopedService):
    model = models.Color

color_service = ColorService()
