from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from storefront import models
from storefront.core.security import CallerIdentity, get_current_identity
from storefront.database.database import SessionLocal
from storefront.services import store_service

def get_db():
    with SessionLocal() as db:
        yield db


def get_store(
    store_id: int,
    db: Session = Depends(get_db),
    identity: CallerIdentity = Depends(get_current_identity),
) -> models.Store:
    store = store_service.get(db, store_id=store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store


def ensure_in_store(db: Session, service, store_id: int, obj_id: Optional[int], label: str) -> None:
    """Reject references to rows that belong to a different store (or to none)."""
    if obj_id is None:
        return
    if service.get(db, store_id, obj_id) is None:
        raise HTTPException(status_code=400, detail=f"{label} {obj_id} does not belong to this store")
