# travel_agency/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from travel_agency.api.routers import auth, cart, health, profile, reference, tours
from travel_agency.data.database import init_db
from travel_agency.data.seed import seed
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Initializing database")
    try:
        init_db()
        seed()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
    logger.info("Database ready")
    yield


def create_app(init_database: bool = True) -> FastAPI:
    app = FastAPI(
        title="Travel Agency",
        version="1.0.0",
        lifespan=lifespan if init_database else None,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(tours.router)
    app.include_router(reference.router)
    app.include_router(cart.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
