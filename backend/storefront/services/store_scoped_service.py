from typing import Optional, Type
from pydantic import BaseModel
from sqlalchemy.orm import Session, Query
from storefront.database.registry import join_condition
from storefront.models.base import Base

class StoreScopedService:
    """
    CRUD for rows owned by a store.

    Every read goes through scoped_query(), so a row belonging to another
    store is never returned. Tables without their own store_id column name
    the table that carries it in scoped_through and are joined to it.
    """
    model: Type[Base] = None
    scoped_through: Optional[str] = None

    def scoped_query(self, db: Session, store_id: int) -> Query:
        query = db.query(self.model)
        if self.scoped_through is None:
            return query.filter(self.model.store_id == store_id)
        parent = Base.metadata.tables[self.scoped_through]
        onclause = join_condition(self.model.__tablename__, self.scoped_through)
        return query.join(parent, onclause).filter(parent.c.store_id == store_id)

    def get_all(self, db: Session, store_id: int, skip: int = 0, limit: int = 100):
        return (
            self.scoped_query(db, store_id)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get(self, db: Session, store_id: int, obj_id: int):
        return self.scoped_query(db, store_id).filter(self.model.id == obj_id).first()

    def create(self, db: Session, store_id: int, obj_in: BaseModel):
        db_obj = self.model(store_id=store_id, **obj_in.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, db_obj, obj_in: BaseModel):
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def delete(self, db: Session, db_obj) -> None:
        db.delete(db_obj)
        db.commit()
