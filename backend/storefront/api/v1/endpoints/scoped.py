from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Dict, List, Optional, Tuple, Type
from storefront import models
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.services.store_scoped_service import StoreScopedService

# field on the incoming payload -> (service owning the referenced rows, label for errors)
References = Dict[str, Tuple[StoreScopedService, str]]


def check_references(db: Session, store_id: int, obj_in: BaseModel, references: References) -> None:
    for field, (service, label) in references.items():
        deps.ensure_in_store(db, service, store_id, getattr(obj_in, field, None), label)


def build_scoped_router(
    service: StoreScopedService,
    read_schema: Type[BaseModel],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    label: str,
    references: Optional[References] = None,
) -> APIRouter:
    """
    List / create / read / update / delete routes for one store-owned resource,
    mounted under /stores/{store_id}/<resource>.
    """
    router = APIRouter()
    logger = setup_logger(f"api.{label.lower()}")
    references = references or {}
    not_found = f"{label} not found"

    def get_owned(obj_id: int, store: models.Store = Depends(deps.get_store), db: Session = Depends(deps.get_db)):
        obj = service.get(db, store.id, obj_id)
        if obj is None:
            raise HTTPException(status_code=404, detail=not_found)
        return obj

    @router.get("/", response_model=List[read_schema])
    def list_rows(
        skip: int = 0,
        limit: int = 100,
        store: models.Store = Depends(deps.get_store),
        db: Session = Depends(deps.get_db),
    ):
        try:
            return service.get_all(db, store.id, skip=skip, limit=limit)
        except Exception as e:
            logger.error(f"Error listing {label} rows for store {store.id}: {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal Server Error")

    @router.post("/", response_model=read_schema)
    def create_row(
        obj_in: create_schema,
        store: models.Store = Depends(deps.get_store),
        db: Session = Depends(deps.get_db),
    ):
        check_references(db, store.id, obj_in, references)
        try:
            obj = service.create(db, store.id, obj_in)
            logger.info(f"Created {label} {obj.id} in store {store.id}")
            return obj
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating {label} in store {store.id}: {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal Server Error")

    @router.get("/{obj_id}", response_model=read_schema)
    def read_row(obj=Depends(get_owned)):
        return obj

    @router.patch("/{obj_id}", response_model=read_schema)
    def update_row(
        obj_in: update_schema,
        obj=Depends(get_owned),
        db: Session = Depends(deps.get_db),
    ):
        check_references(db, obj.store_id, obj_in, references)
        try:
            return service.update(db, obj, obj_in)
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating {label} {obj.id}: {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal Server Error")

    @router.delete("/{obj_id}", response_model=read_schema)
    def delete_row(obj=Depends(get_owned), db: Session = Depends(deps.get_db)):
        deleted = read_schema.model_validate(obj)
        try:
            service.delete(db, obj)
            logger.info(f"Deleted {label} {deleted.id}")
            return deleted
        except IntegrityError:
            db.rollback()
            raise HTTPException(status_code=409, detail=f"{label} is still referenced")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting {label} {deleted.id}: {str(e)}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal Server Error")

    return router
