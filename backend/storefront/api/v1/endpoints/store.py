from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session
from typing import List
from storefront import schemas
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.core.security import CallerIdentity, get_current_identity
from storefront.services import user_service

router = APIRouter()

logger = setup_logger("api.store")

@router.post("", response_model=List[schemas.User])
async def list_store_users(
    request: Request,
    identity: CallerIdentity = Depends(get_current_identity),
    db: Session = Depends(deps.get_db),
):
    """
    Authenticated full read of the users table.

    The request body must be valid JSON but is otherwise ignored; nothing is
    written. Any failure is logged and reported as a bare 500.
    """
    try:
        await request.json()
        return user_service.get_all(db)
    except Exception as e:
        logger.error(f"STORES: POST - error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
