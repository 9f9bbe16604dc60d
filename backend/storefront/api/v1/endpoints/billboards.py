from fastapi import Depends
from sqlalchemy.orm import Session
from typing import List
from storefront import models, schemas
from storefront.api import deps
from storefront.api.v1.endpoints.scoped import build_scoped_router
from storefront.services import billboard_service, category_service

router = build_scoped_router(
    billboard_service,
    schemas.Billboard,
    schemas.BillboardCreate,
    schemas.BillboardUpdate,
    label="Billboard",
    references={"category_id": (category_service, "Category")},
)

@router.get("/{obj_id}/categories", response_model=List[schemas.Category])
def read_billboard_categories(
    obj_id: int,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
):
    return category_service.get_by_billboard(db, store.id, billboard_id=obj_id)
