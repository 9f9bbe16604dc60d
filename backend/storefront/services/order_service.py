from sqlalchemy.orm import Session, joinedload
from typing import Optional, List
from storefront import models, schemas
from storefront.services.store_scoped_service import StoreScopedService

class OrderService(StoreScopedService):
    model = models.Order

    def get_all(
            self, db: Session, store_id: int, skip: int = 0, limit: int = 100,
            is_paid: Optional[bool] = None
    ) -> List[models.Order]:
        query = self.scoped_query(db, store_id).options(joinedload(models.Order.order_items))
        if is_paid is not None:
            query = query.filter(models.Order.is_paid == is_paid)
        return query.order_by(models.Order.created_at.desc(), models.Order.id.desc()).offset(skip).limit(limit).all()

    def create(self, db: Session, store_id: int, order: schemas.OrderCreate):
        db_order = models.Order(store_id=store_id, **order.model_dump(exclude={"product_ids"}))
        db_order.order_items = [models.OrderItem(product_id=product_id) for product_id in order.product_ids]
        db.add(db_order)
        db.commit()
        db.refresh(db_order)
        return db_order

order_service = OrderService()
