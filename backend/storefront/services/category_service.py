from sqlalchemy.orm import Session
from storefront import models
from storefront.services.store_scoped_service import StoreScopedService

class CategoryService(StoreScopedService):
    model = models.Category

    def get_by_billboard(self, db: Session, store_id: int, billboard_id: int):
        return (
            self.scoped_query(db, store_id)
            .filter(models.Category.billboard_id == billboard_id)
            .order_by(models.Category.id)
            .all()
        )

category_service = CategoryService()
