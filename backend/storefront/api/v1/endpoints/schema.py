from fastapi import APIRouter, HTTPException
from typing import List
from storefront import schemas
from storefront.database import registry

router = APIRouter()

@router.get("/tables", response_model=List[schemas.TableInfo])
def read_tables():
    return registry.get_tables()

@router.get("/tables/{name}", response_model=schemas.TableInfo)
def read_table(name: str):
    try:
        return registry.get_table(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Table not found")
