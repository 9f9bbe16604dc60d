from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront import models, schemas
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.services import store_service, user_service

router = APIRouter()

logger = setup_logger("api.stores")

def _check_owner(db: Session, user_id: Optional[int]) -> None:
    if user_id is not None and user_service.get(db, user_id=user_id) is None:
        raise HTTPException(status_code=400, detail=f"User {user_id} does not exist")

@router.get("/", response_model=List[schemas.Store])
def read_stores(
    skip: int = 0,
    limit: int = 100,
    user_id: Optional[int] = None,
    db: Session = Depends(deps.get_db),
):
    try:
        return store_service.get_all(db, skip=skip, limit=limit, user_id=user_id)
    except Exception as e:
        logger.error(f"Error listing stores: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/{store_id}", response_model=schemas.Store)
def read_store(store: models.Store = Depends(deps.get_store)):
    return store

@router.post("/", response_model=schemas.Store)
def create_store(store_in: schemas.StoreCreate, db: Session = Depends(deps.get_db)):
    _check_owner(db, store_in.user_id)
    try:
        store = store_service.create(db, store=store_in)
        logger.info(f"Created store {store.id} ({store.name})")
        return store
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating store: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.patch("/{store_id}", response_model=schemas.Store)
def update_store(
    store_in: schemas.StoreUpdate,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
):
    _check_owner(db, store_in.user_id)
    try:
        return store_service.update(db, db_store=store, store=store_in)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating store {store.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.delete("/{store_id}", response_model=schemas.Store)
def delete_store(store: models.Store = Depends(deps.get_store), db: Session = Depends(deps.get_db)):
    deleted = schemas.Store.model_validate(store)
    try:
        store_service.delete(db, db_store=store)
        logger.info(f"Deleted store {deleted.id}")
        return deleted
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Store still has dependent rows")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting store {deleted.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
