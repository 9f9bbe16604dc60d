from sqlalchemy.orm import Session, joinedload
from typing import Optional, List, Iterable
from storefront import models, schemas
from storefront.services.store_scoped_service import StoreScopedService

class ProductService(StoreScopedService):
    model = models.Product

    def get_all(
            self, db: Session, store_id: int, skip: int = 0, limit: int = 100,
            category_id: Optional[int] = None,
            size_id: Optional[int] = None,
            color_id: Optional[int] = None,
            is_featured: Optional[bool] = None,
            include_archived: bool = False
    ) -> List[models.Product]:
        query = self.scoped_query(db, store_id).options(joinedload(models.Product.images))
        if category_id is not None:
            query = query.filter(models.Product.category_id == category_id)
        if size_id is not None:
            query = query.filter(models.Product.size_id == size_id)
        if color_id is not None:
            query = query.filter(models.Product.color_id == color_id)
        if is_featured is not None:
            query = query.filter(models.Product.is_featured == is_featured)
        if not include_archived:
            query = query.filter(models.Product.is_archived.is_(False))
        return query.order_by(models.Product.id).offset(skip).limit(limit).all()

    def missing_ids(self, db: Session, store_id: int, product_ids: Iterable[int]) -> List[int]:
        """Ids from product_ids that are not products of this store."""
        wanted = set(product_ids)
        if not wanted:
            return []
        found = {
            row.id for row in
            db.query(models.Product.id)
            .filter(models.Product.store_id == store_id, models.Product.id.in_(wanted))
        }
        return sorted(wanted - found)

    def create(self, db: Session, store_id: int, product: schemas.ProductCreate):
        data = product.model_dump(exclude={"images"})
        db_product = models.Product(store_id=store_id, **data)
        db_product.images = [models.Image(url=url) for url in product.images]
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
        return db_product

    def update(self, db: Session, db_product: models.Product, product: schemas.ProductUpdate):
        changes = product.model_dump(exclude_unset=True)
        images = changes.pop("images", None)
        for field, value in changes.items():
            setattr(db_product, field, value)
        if images is not None:
            # Orphaned rows are deleted by the relationship cascade
            db_product.images = [models.Image(url=url) for url in images]
        db.commit()
        db.refresh(db_product)
        return db_product

product_service = ProductService()
