# travel_agency/repos/catalog_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from travel_agency.data.models.city import CityModel
from travel_agency.data.models.client import ClientModel
from travel_agency.data.models.hotel import HotelModel
from travel_agency.data.models.tour import TourModel


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_tour(self, tour_id: int) -> TourModel | None:
        return self.db.execute(
            select(TourModel)
            .where(TourModel.id == tour_id)
            .options(
                selectinload(TourModel.city),
                selectinload(TourModel.hotel),
                selectinload(TourModel.client),
            )
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def tour_exists(self, tour_id: int) -> bool:
        return self.db.execute(
            select(TourModel.id).where(TourModel.id == tour_id)
        ).scalar_one_or_none() is not None

    def list_tours(self) -> list[TourModel]:
        return list(
            self.db.execute(
                select(TourModel)
                .options(
                    selectinload(TourModel.city),
                    selectinload(TourModel.hotel),
                    selectinload(TourModel.client),
                )
                .order_by(TourModel.id)
            ).scalars().all()
        )

    def get_city(self, city_id: int) -> CityModel | None:
        return self.db.get(CityModel, city_id)

    def get_hotel(self, hotel_id: int) -> HotelModel | None:
        return self.db.get(HotelModel, hotel_id)

    def get_client(self, client_id: int) -> ClientModel | None:
        return self.db.get(ClientModel, client_id)

    def list_cities(self) -> list[CityModel]:
        return list(self.db.execute(select(CityModel).order_by(CityModel.id)).scalars().all())

    def list_hotels(self) -> list[HotelModel]:
        return list(self.db.execute(select(HotelModel).order_by(HotelModel.id)).scalars().all())

    def list_clients(self) -> list[ClientModel]:
        return list(self.db.execute(select(ClientModel).order_by(ClientModel.id)).scalars().all())

    def add(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj) -> None:
        self.db.delete(obj)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
