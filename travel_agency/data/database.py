# travel_agency/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from travel_agency.utils.settings import DATABASE_URL

Base = declarative_base()


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        #sqlite: wiele watkow na jednym pliku, czekaj na lock zamiast bledu
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": 30},
        )

        #sqlite domyslnie ignoruje klucze obce
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    """Creates missing tables. Never drops existing data."""
    #import modeli zeby zarejestrowaly sie w Base.metadata
    import travel_agency.data.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
