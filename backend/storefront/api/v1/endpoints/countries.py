from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from storefront import schemas
from storefront.api import deps
from storefront.core.logger import setup_logger
from storefront.services import city_service, country_service

router = APIRouter()
cities_router = APIRouter()

logger = setup_logger("api.countries")

@router.get("/", response_model=List[schemas.Country])
def read_countries(skip: int = 0, limit: int = 100, db: Session = Depends(deps.get_db)):
    return country_service.get_all(db, skip=skip, limit=limit)

@router.post("/", response_model=schemas.Country)
def create_country(country_in: schemas.CountryCreate, db: Session = Depends(deps.get_db)):
    if country_service.get_by_name(db, name=country_in.name):
        raise HTTPException(status_code=409, detail="Country already exists")
    country = country_service.create(db, country=country_in)
    if country is None:
        # Lost a race against a concurrent insert of the same name
        raise HTTPException(status_code=409, detail="Country already exists")
    return country

@router.get("/{country_id}/cities", response_model=List[schemas.City])
def read_country_cities(country_id: int, db: Session = Depends(deps.get_db)):
    if not country_service.get(db, country_id=country_id):
        raise HTTPException(status_code=404, detail="Country not found")
    return city_service.get_by_country(db, country_id=country_id)

@cities_router.post("/", response_model=schemas.City)
def create_city(city_in: schemas.CityCreate, db: Session = Depends(deps.get_db)):
    if city_in.country_id is not None and not country_service.get(db, country_id=city_in.country_id):
        raise HTTPException(status_code=400, detail=f"Country {city_in.country_id} does not exist")
    try:
        return city_service.create(db, city=city_in)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating city: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal Server Error")
