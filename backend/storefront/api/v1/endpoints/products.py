from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
from storefront import models, schemas
from storefront.api import deps
from storefront.api.v1.endpoints.scoped import check_references
from storefront.core.logger import setup_logger
from storefront.services import category_service, color_service, product_service, size_service

router = APIRouter()

logger = setup_logger("api.products")

PRODUCT_REFERENCES = {
    "category_id": (category_service, "Category"),
    "size_id": (size_service, "Size"),
    "color_id": (color_service, "Color"),
}

def get_product(
    product_id: int,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
) -> models.Product:
    product = product_service.get(db, store.id, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.get("/", response_model=List[schemas.Product])
def read_products(
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
    skip: int = 0,
    limit: int = 100,
    category_id: Optional[int] = None,
    size_id: Optional[int] = None,
    color_id: Optional[int] = None,
    is_featured: Optional[bool] = None,
    include_archived: bool = False
):
    """
    Retrieve the store's products with optional filtering.
    Archived products are left out unless include_archived is set.
    """
    try:
        return product_service.get_all(
            db,
            store.id,
            skip=skip,
            limit=limit,
            category_id=category_id,
            size_id=size_id,
            color_id=color_id,
            is_featured=is_featured,
            include_archived=include_archived
        )
    except Exception as e:
        logger.error(f"Error getting product list: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.get("/{product_id}", response_model=schemas.Product)
def read_product(product: models.Product = Depends(get_product)):
    return product

@router.post("/", response_model=schemas.Product)
def create_product(
    product_in: schemas.ProductCreate,
    store: models.Store = Depends(deps.get_store),
    db: Session = Depends(deps.get_db),
):
    """
    Create a product together with its images.
    """
    check_references(db, store.id, product_in, PRODUCT_REFERENCES)
    try:
        product = product_service.create(db, store.id, product=product_in)
        logger.info(f"Created product {product.id} in store {store.id}")
        return product
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating product: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.patch("/{product_id}", response_model=schemas.Product)
def update_product(
    product_in: schemas.ProductUpdate,
    product: models.Product = Depends(get_product),
    db: Session = Depends(deps.get_db),
):
    check_references(db, product.store_id, product_in, PRODUCT_REFERENCES)
    try:
        return product_service.update(db, product, product_in)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating product {product.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")

@router.delete("/{product_id}", response_model=schemas.Product)
def delete_product(product: models.Product = Depends(get_product), db: Session = Depends(deps.get_db)):
    """
    Delete a product; its images go with it. Products on an order cannot be deleted.
    """
    deleted = schemas.Product.model_validate(product)
    try:
        product_service.delete(db, product)
        logger.info(f"Deleted product {deleted.id}")
        return deleted
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Product is referenced by an order")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting product {deleted.id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
