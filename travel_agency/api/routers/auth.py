from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from travel_agency.api.deps import get_auth_service
from travel_agency.data.database import get_db
from travel_agency.domain.errors import InvalidCredentialsError, InvalidInputError
from travel_agency.domain.schemas import Credentials, FormOut
from travel_agency.services.auth_service import AuthService
from travel_agency.services.user_service import UserService
from travel_agency.utils.settings import SESSION_COOKIE_NAME, SESSION_TTL_SECONDS

router = APIRouter(tags=["auth"])


@router.get("/login", response_model=FormOut)
def login_form():
    return FormOut(form="login", fields=["username", "password"], action="/login")


@router.get("/register", response_model=FormOut)
def register_form():
    return FormOut(form="register", fields=["username", "password"], action="/register")


@router.post("/login")
def login(payload: Credentials, auth: AuthService = Depends(get_auth_service)):
    try:
        session = auth.login(payload.username, payload.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))

    response = RedirectResponse(url="/", status_code=303)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session.token,
        max_age=SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/register")
def register(payload: Credentials, db: Session = Depends(get_db)):
    try:
        UserService(db).register(payload.username, payload.password)
    except InvalidInputError as e:
        # DuplicateUsernameError tez tu trafia
        raise HTTPException(status_code=400, detail=str(e))

    return RedirectResponse(url="/login", status_code=303)


@router.get("/logout")
def logout(request: Request, auth: AuthService = Depends(get_auth_service)):
    auth.logout(request.cookies.get(SESSION_COOKIE_NAME))

    response = RedirectResponse(url="/login", status_code=303)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response
