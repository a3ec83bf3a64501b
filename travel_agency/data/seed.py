# travel_agency/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from travel_agency.data.database import SessionLocal
from travel_agency.data.models import CityModel, ClientModel, HotelModel, TourModel, UserModel
from travel_agency.data.models.user import ROLE_ADMIN
from travel_agency.services.user_service import UserService
from travel_agency.utils.settings import ADMIN_USERNAME, ADMIN_PASSWORD
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


def seed(db: Session | None = None) -> bool:
    """Sample catalog + admin account. Only seeds an empty database, never wipes anything."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        if db.query(TourModel).first() or db.query(UserModel).first():
            logger.info("Database not empty, skipping seed")
            return False

        moscow = CityModel(name="Москва", country="Россия")
        paris = CityModel(name="Париж", country="Франция")
        hotel_moscow = HotelModel(name="Отель Москва", stars=5, address="ул. Тверская, 1")
        hotel_paris = HotelModel(name="Отель Париж", stars=4, address="ул. Елисейские поля, 10")
        ivan = ClientModel(name="Иван Иванов", email="ivan@example.com", phone="+79991234567")
        maria = ClientModel(name="Мария Петрова", email="maria@example.com", phone="+79997654321")

        db.add_all([
            TourModel(
                name="Экскурсия по Москве",
                description="Обзорная экскурсия по главным достопримечательностям Москвы.",
                price=Decimal("15000.00"),
                duration=3,
                city=moscow,
                hotel=hotel_moscow,
                client=ivan,
            ),
            TourModel(
                name="Романтический Париж",
                description="Тур для влюблённых по самому романтичному городу мира.",
                price=Decimal("45000.00"),
                duration=7,
                city=paris,
                hotel=hotel_paris,
                client=maria,
            ),
        ])
        db.commit()

        if ADMIN_PASSWORD:
            UserService(db).register(ADMIN_USERNAME, ADMIN_PASSWORD, role=ROLE_ADMIN)
        else:
            logger.warning("ADMIN_PASSWORD not set, no admin account created")

        logger.info("Seed data inserted")
        return True
    finally:
        if own_session:
            db.close()
