from sqlalchemy.orm import Session
from storefront import models, schemas

class StoreService:
    def get(self, db: Session, store_id: int):
        return db.query(models.Store).filter(models.Store.id == store_id).first()

    def get_all(self, db: Session, skip: int = 0, limit: int = 100, user_id: int = None):
        query = db.query(models.Store)
        if user_id is not None:
            query = query.filter(models.Store.user_id == user_id)
        return query.order_by(models.Store.id).offset(skip).limit(limit).all()

    def create(self, db: Session, store: schemas.StoreCreate):
        db_store = models.Store(**store.model_dump())
        db.add(db_store)
        db.commit()
        db.refresh(db_store)
        return db_store

    def update(self, db: Session, db_store: models.Store, store: schemas.StoreUpdate):
        for field, value in store.model_dump(exclude_unset=True).items():
            setattr(db_store, field, value)
        db.commit()
        db.refresh(db_store)
        return db_store

    def delete(self, db: Session, db_store: models.Store) -> None:
        db.delete(db_store)
        db.commit()

store_service = StoreService()
