from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from storefront import schemas
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.services import user_service

router = APIRouter()

logger = setup_logger("api.users")

@router.get("/", response_model=List[schemas.User])
def list_users(skip: int = 0, limit: int = 100, db: Session = Depends(deps.get_db)):
    try:
        return user_service.get_all(db, skip=skip, limit=limit)
    except Exception as e:
        logger.error(f"Error listing users: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/{user_id}", response_model=schemas.User)
def read_user(user_id: int, db: Session = Depends(deps.get_db)):
    user = user_service.get(db, user_id=user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.post("/", response_model=schemas.User)
def create_user(user_in: schemas.UserCreate, db: Session = Depends(deps.get_db)):
    try:
        user = user_service.create(db, user=user_in)
        logger.info(f"Created user {user.id}")
        return user
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating user: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
