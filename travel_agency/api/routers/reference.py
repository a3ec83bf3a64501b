# travel_agency/api/routers/reference.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from travel_agency.api.deps import require_admin
from travel_agency.data.database import get_db
from travel_agency.domain.errors import InvalidInputError, StorageError
from travel_agency.domain.schemas import CityIn, CityOut, ClientIn, ClientOut, HotelIn, HotelOut
from travel_agency.services.catalog_service import CatalogService

router = APIRouter(tags=["reference"])


@router.get("/cities", response_model=List[CityOut])
def list_cities(db: Session = Depends(get_db)):
    return CatalogService(db).list_cities()


@router.post("/cities", response_model=CityOut, status_code=201, dependencies=[Depends(require_admin)])
def create_city(payload: CityIn, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_city(payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/hotels", response_model=List[HotelOut])
def list_hotels(db: Session = Depends(get_db)):
    return CatalogService(db).list_hotels()


@router.post("/hotels", response_model=HotelOut, status_code=201, dependencies=[Depends(require_admin)])
def create_hotel(payload: HotelIn, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_hotel(payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/clients", response_model=List[ClientOut])
def list_clients(db: Session = Depends(get_db)):
    return CatalogService(db).list_clients()


@router.post("/clients", response_model=ClientOut, status_code=201, dependencies=[Depends(require_admin)])
def create_client(payload: ClientIn, db: Session = Depends(get_db)):
    try:
        return CatalogService(db).create_client(payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
