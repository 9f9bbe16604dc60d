from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from storefront import models, schemas
from storefront.api import deps
from storefront.services import image_service

router = APIRouter()

@router.get("/", response_model=List[schemas.Image])
def read_store_images(
    skip: int = 0,
    limit: int = 100,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
):
    """Every image attached to any of the store's products."""
    return image_service.get_all(db, store.id, skip=skip, limit=limit)
