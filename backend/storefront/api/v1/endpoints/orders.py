from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront import models, schemas
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.services import order_service, product_service

router = APIRouter()

logger = setup_logger("api.orders")

def get_order(
    order_id: int,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
) -> models.Order:
    order = order_service.get(db, store.id, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@router.get("/", response_model=List[schemas.Order])
def read_orders(
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100,
    is_paid: Optional[bool] = None,
):
    try:
        return order_service.get_all(db, store.id, skip=skip, limit=limit, is_paid=is_paid)
    except Exception as e:
        logger.error(f"Error getting order list: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/{order_id}", response_model=schemas.Order)
def read_order(order: models.Order = Depends(get_order)):
    return order

@router.post("/", response_model=schemas.Order)
def create_order(
    order_in: schemas.OrderCreate,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
):
    missing = product_service.missing_ids(db, store.id, order_in.product_ids)
    if missing:
        raise HTTPException(status_code=400, detail=f"Products not in this store: {missing}")
    try:
        order = order_service.create(db, store.id, order=order_in)
        logger.info(f"Created order {order.id} with {len(order.order_items)} items in store {store.id}")
        return order
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating order: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.patch("/{order_id}", response_model=schemas.Order)
def update_order(
    order_in: schemas.OrderUpdate,
    order: models.Order = Depends(get_order),
    db: Session = Depends(deps.get_db),
):
    try:
        return order_service.update(db, order, order_in)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating order {order.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.delete("/{order_id}", response_model=schemas.Order)
def delete_order(order: models.Order = Depends(get_order), db: Session = Depends(deps.get_db)):
    deleted = schemas.Order.model_validate(order)
    try:
        order_service.delete(db, order)
        logger.info(f"Deleted order {deleted.id}")
        return deleted
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting order {deleted.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
