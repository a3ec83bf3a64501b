import os

# przed importem aplikacji: bez postgresa, szybki bcrypt
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from decimal import Decimal

import fakeredis
import pytest
from fastapi.testclient import TestClient

from travel_agency.api.deps import get_session_store
from travel_agency.data.database import get_db, init_db, make_engine, make_session_factory
from travel_agency.data.models import CityModel, HotelModel, TourModel
from travel_agency.data.models.user import ROLE_ADMIN
from travel_agency.main import create_app
from travel_agency.services.session_store import SessionStore
from travel_agency.services.user_service import UserService


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def session_store():
    server = fakeredis.FakeServer()
    return SessionStore(client=fakeredis.FakeRedis(server=server, decode_responses=True), ttl=600)


@pytest.fixture
def tours(db):
    city = CityModel(name="Paris", country="France")
    hotel = HotelModel(name="Hotel Paris", stars=4, address="Champs-Elysees 10")
    tour_a = TourModel(name="Tour A", price=Decimal("100.00"), duration=3, city=city, hotel=hotel)
    tour_b = TourModel(name="Tour B", price=Decimal("50.00"), duration=7, city=city, hotel=hotel)
    db.add_all([tour_a, tour_b])
    db.commit()
    return {"a": tour_a.id, "b": tour_b.id, "city": city.id, "hotel": hotel.id}


@pytest.fixture
def alice(db):
    return UserService(db).register("alice", "alice-secret")


@pytest.fixture
def bob(db):
    return UserService(db).register("bob", "bob-secret")


@pytest.fixture
def admin(db):
    return UserService(db).register("boss", "boss-secret", role=ROLE_ADMIN)


@pytest.fixture
def client(session_factory, session_store):
    app = create_app(init_database=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: session_store

    return TestClient(app)


@pytest.fixture
def login(client):
    def _login(username, password):
        return client.post(
            "/login",
            json={"username": username, "password": password},
            follow_redirects=False,
        )

    return _login
