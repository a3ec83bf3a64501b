# travel_agency/services/catalog_service.py
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_agency.data.models.city import CityModel
from travel_agency.data.models.client import ClientModel
from travel_agency.data.models.hotel import HotelModel
from travel_agency.data.models.tour import TourModel
from travel_agency.domain.errors import InvalidInputError, StorageError, TourNotFoundError
from travel_agency.domain.schemas import CityIn, ClientIn, HotelIn, TourIn
from travel_agency.repos.cart_repo import CartRepo
from travel_agency.repos.catalog_repo import CatalogRepo
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Katalog wycieczek i dane slownikowe (miasta, hotele, klienci).
    Odczyt publiczny, zapis tylko dla admina (sprawdzane w routerach).
    """

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)
        self.cart_repo = CartRepo(db)

    #query
    def get_tour(self, tour_id: int) -> TourModel:
        tour = self.repo.get_tour(tour_id)
        if not tour:
            raise TourNotFoundError(tour_id)
        return tour

    def tour_exists(self, tour_id: int) -> bool:
        return self.repo.tour_exists(tour_id)

    def list_tours(self) -> list[TourModel]:
        return self.repo.list_tours()

    def list_cities(self) -> list[CityModel]:
        return self.repo.list_cities()

    def list_hotels(self) -> list[HotelModel]:
        return self.repo.list_hotels()

    def list_clients(self) -> list[ClientModel]:
        return self.repo.list_clients()

    #commands
    def create_tour(self, payload: TourIn) -> TourModel:
        self._check_references(payload)

        with self._storage("create tour"):
            tour = self.repo.add(TourModel(**self._tour_fields(payload)))
        logger.info(f"Tour {tour.id} '{tour.name}' created")
        return self.get_tour(tour.id)

    def update_tour(self, tour_id: int, payload: TourIn) -> TourModel:
        tour = self.get_tour(tour_id)
        self._check_references(payload)

        fields = self._tour_fields(payload)
        with self._storage("update tour"):
            for field, value in fields.items():
                setattr(tour, field, value)
            self.repo.commit()

        logger.info(f"Tour {tour_id} updated, price {tour.price}")
        return self.get_tour(tour_id)

    def delete_tour(self, tour_id: int) -> None:
        tour = self.get_tour(tour_id)

        #najpierw pozycje koszykow, zeby nie zostaly wiszace referencje
        with self._storage("delete tour"):
            removed = self.cart_repo.delete_items_for_tour(tour_id)
            self.repo.delete(tour)
            self.repo.commit()

        logger.info(f"Tour {tour_id} deleted together with {removed} cart item(s)")

    def create_city(self, payload: CityIn) -> CityModel:
        city = CityModel(name=_required(payload.name, "name"), country=_required(payload.country, "country"))
        with self._storage("create city"):
            city = self.repo.add(city)
        logger.info(f"City {city.id} '{city.name}' created")
        return city

    def create_hotel(self, payload: HotelIn) -> HotelModel:
        hotel = HotelModel(name=_required(payload.name, "name"), stars=payload.stars, address=payload.address)
        with self._storage("create hotel"):
            hotel = self.repo.add(hotel)
        logger.info(f"Hotel {hotel.id} '{hotel.name}' created")
        return hotel

    def create_client(self, payload: ClientIn) -> ClientModel:
        client = ClientModel(name=_required(payload.name, "name"), email=_required(payload.email, "email"), phone=payload.phone)
        with self._storage("create client"):
            client = self.repo.add(client)
        logger.info(f"Client {client.id} '{client.name}' created")
        return client

    @contextmanager
    def _storage(self, action: str):
        #blad bazy: rollback sesji i StorageError, bez ponawiania
        try:
            yield
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Database error ({action}): {e}")
            raise StorageError(f"Could not {action}") from e

    def _check_references(self, payload: TourIn) -> None:
        if payload.price < 0:
            raise InvalidInputError("Price must not be negative")
        if payload.duration <= 0:
            raise InvalidInputError("Duration must be a positive number of days")
        if not self.repo.get_city(payload.city_id):
            raise InvalidInputError(f"City {payload.city_id} does not exist")
        if not self.repo.get_hotel(payload.hotel_id):
            raise InvalidInputError(f"Hotel {payload.hotel_id} does not exist")
        if payload.client_id is not None and not self.repo.get_client(payload.client_id):
            raise InvalidInputError(f"Client {payload.client_id} does not exist")

    @staticmethod
    def _tour_fields(payload: TourIn) -> dict:
        return {
            "name": _required(payload.name, "name"),
            "description": payload.description,
            "price": payload.price,
            "duration": payload.duration,
            "city_id": payload.city_id,
            "hotel_id": payload.hotel_id,
            "client_id": payload.client_id,
        }


def _required(value: str, field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise InvalidInputError(f"Field '{field}' is required")
    return value
