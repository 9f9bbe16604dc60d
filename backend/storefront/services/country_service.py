from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from storefront import models, schemas

class CountryService:
    def get(self, db: Session, country_id: int):
        return db.query(models.Country).filter(models.Country.id == country_id).first()

    def get_all(self, db: Session, skip: int = 0, limit: int = 100):
        return db.query(models.Country).order_by(models.Country.name).offset(skip).limit(limit).all()

    def get_by_name(self, db: Session, name: str):
        return db.query(models.Country).filter(models.Country.name == name).first()

    def create(self, db: Session, country: schemas.CountryCreate):
        db_country = models.Country(**country.model_dump())
        try:
            db.add(db_country)
            db.commit()
            db.refresh(db_country)
            return db_country
        except IntegrityError:
            db.rollback()
            return None

country_service = CountryService()


class CityService:
    def get_by_country(self, db: Session, country_id: int):
        return (
            db.query(models.City)
            .filter(models.City.country_id == country_id)
            .order_by(models.City.name)
            .all()
        )

    def create(self, db: Session, city: schemas.CityCreate):
        db_city = models.City(**city.model_dump())
        db.add(db_city)
        db.commit()
        db.refresh(db_city)
        return db_city

city_service = CityService()
