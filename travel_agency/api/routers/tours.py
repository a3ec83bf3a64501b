from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from travel_agency.api.deps import require_admin
from travel_agency.data.database import get_db
from travel_agency.domain.errors import InvalidInputError, NotFoundError, StorageError
from travel_agency.domain.schemas import CartActionOut, TourIn, TourOut
from travel_agency.services.catalog_service import CatalogService

router = APIRouter(tags=["tours"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("/", response_model=List[TourOut])
def catalog(db: Session = Depends(get_db)):
    return get_service(db).list_tours()


@router.get("/tours/{tour_id}", response_model=TourOut)
def get_tour(tour_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_tour(tour_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/tours", response_model=TourOut, status_code=201, dependencies=[Depends(require_admin)])
def create_tour(payload: TourIn, db: Session = Depends(get_db)):
    try:
        return get_service(db).create_tour(payload)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.put("/tours/{tour_id}", response_model=TourOut, dependencies=[Depends(require_admin)])
def update_tour(tour_id: int, payload: TourIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.update_tour(tour_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.delete("/tours/{tour_id}", response_model=CartActionOut, dependencies=[Depends(require_admin)])
def delete_tour(tour_id: int, db: Session = Depends(get_db)):
    try:
        get_service(db).delete_tour(tour_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return CartActionOut(success=True, message=f"Tour {tour_id} deleted")
