from typing import Optional
from sqlalchemy.orm import Session
from storefront import models, schemas

class UserService:
    def get(self, db: Session, user_id: int):
        return db.query(models.User).filter(models.User.id == user_id).first()

    def get_all(self, db: Session, skip: int = 0, limit: Optional[int] = None):
        query = db.query(models.User).order_by(models.User.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, db: Session, user: schemas.UserCreate):
        db_user = models.User(**user.model_dump())
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user

user_service = UserService()
