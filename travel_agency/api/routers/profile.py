from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from travel_agency.api.deps import get_auth_service, get_current_session, require_session
from travel_agency.data.database import get_db
from travel_agency.domain.errors import InvalidInputError, NotFoundError
from travel_agency.domain.schemas import ProfileUpdate, SessionContext, UserRead
from travel_agency.services.auth_service import AuthService
from travel_agency.services.user_service import UserService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=UserRead)
def get_profile(
    session: SessionContext | None = Depends(get_current_session),
    db: Session = Depends(get_db),
):
    if session is None:
        return RedirectResponse(url="/login", status_code=303)

    try:
        return UserService(db).get_user(session.user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=UserRead)
def update_profile(
    payload: ProfileUpdate,
    session: SessionContext = Depends(require_session),
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service),
):
    try:
        user = UserService(db).update_profile(session.user_id, payload.username, payload.password)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if user.username != session.username:
        auth.refresh_session(session, user.username)
    return user
