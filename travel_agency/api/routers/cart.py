#travel_agency/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse
from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from travel_agency.api.deps import get_session_store
from travel_agency.data.database import get_db
from travel_agency.domain.errors import ForbiddenError, NotFoundError, StorageError
from travel_agency.domain.schemas import CartActionOut, CartOut, SessionContext
from travel_agency.services.cart_service import CartService
from travel_agency.services.session_store import SessionStore
from travel_agency.utils.settings import SESSION_COOKIE_NAME
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])

SESSION_UNAVAILABLE = "Session service is unavailable, please try again"


def get_service(db: Session):
    return CartService(db=db)


def _result(status_code: int, **payload) -> JSONResponse:
    #zawsze {success, message}, skrypt po stronie klienta nie parsuje HTMLa
    return JSONResponse(status_code=status_code, content=CartActionOut(**payload).model_dump(exclude_none=True))


def _load_session(request: Request, sessions: SessionStore) -> SessionContext | None:
    # RedisError leci dalej (po retry w SessionStore), handler decyduje o odpowiedzi
    try:
        return sessions.get(request.cookies.get(SESSION_COOKIE_NAME))
    except RedisError as e:
        logger.error(f"Session lookup failed: {e}")
        raise


def _parse_id(raw: str) -> int | None:
    #id z URL jako str, zeby zly format dal {success: false} zamiast domyslnego 422
    try:
        value = int(raw)
    except ValueError:
        return None
    #poza zakresem BIGINT i tak nie ma takiego wiersza
    return value if 0 < value < 2**63 else None


@router.get("", response_model=CartOut)
def view_cart(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    db: Session = Depends(get_db),
):
    try:
        session = _load_session(request, sessions)
    except RedisError:
        raise HTTPException(status_code=503, detail=SESSION_UNAVAILABLE)

    if session is None:
        return RedirectResponse(url="/login", status_code=303)

    svc = get_service(db)
    try:
        return svc.view_cart(session.user_id)
    except StorageError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/add/{tour_id}", response_model=CartActionOut)
def add_to_cart(
    tour_id: str,
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    db: Session = Depends(get_db),
):
    try:
        session = _load_session(request, sessions)
    except RedisError:
        return _result(503, success=False, message=SESSION_UNAVAILABLE)

    if session is None:
        return _result(401, success=False, message="Please log in to use the cart")

    parsed_id = _parse_id(tour_id)
    if parsed_id is None:
        return _result(404, success=False, message=f"Tour {tour_id} not found")

    svc = get_service(db)
    try:
        line = svc.add_to_cart(session.user_id, parsed_id)
    except NotFoundError as e:
        return _result(404, success=False, message=str(e))
    except StorageError as e:
        return _result(503, success=False, message=str(e))

    return _result(200, success=True, message="Tour added to cart", line_id=line["line_id"], quantity=line["quantity"])


@router.post("/remove/{item_id}", response_model=CartActionOut)
def remove_from_cart(
    item_id: str,
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    db: Session = Depends(get_db),
):
    try:
        session = _load_session(request, sessions)
    except RedisError:
        return _result(503, success=False, message=SESSION_UNAVAILABLE)

    if session is None:
        return _result(401, success=False, message="Please log in to use the cart")

    parsed_id = _parse_id(item_id)
    if parsed_id is None:
        return _result(404, success=False, message=f"Cart item {item_id} not found")

    svc = get_service(db)
    try:
        svc.remove_from_cart(session.user_id, parsed_id)
    except ForbiddenError as e:
        return _result(403, success=False, message=str(e))
    except NotFoundError as e:
        return _result(404, success=False, message=str(e))
    except StorageError as e:
        return _result(503, success=False, message=str(e))

    return _result(200, success=True, message="Tour removed from cart")
