# travel_agency/api/deps.py
from functools import lru_cache

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from travel_agency.data.database import get_db
from travel_agency.data.models.user import ROLE_ADMIN
from travel_agency.domain.errors import ForbiddenError, UnauthenticatedError
from travel_agency.domain.schemas import SessionContext
from travel_agency.services.auth_service import AuthService, require_auth, require_role
from travel_agency.services.session_store import SessionStore
from travel_agency.utils.settings import SESSION_COOKIE_NAME


@lru_cache()
def get_session_store() -> SessionStore:
    return SessionStore()


def get_auth_service(
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthService:
    return AuthService(db, sessions)


def get_current_session(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
) -> SessionContext | None:
    return sessions.get(request.cookies.get(SESSION_COOKIE_NAME))


def require_session(session: SessionContext | None = Depends(get_current_session)) -> SessionContext:
    try:
        require_auth(session)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return session


def require_admin(session: SessionContext | None = Depends(get_current_session)) -> SessionContext:
    try:
        require_role(session, ROLE_ADMIN)
    except UnauthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return session
