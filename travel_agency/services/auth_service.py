# travel_agency/services/auth_service.py
from sqlalchemy.orm import Session

from travel_agency.domain.errors import ForbiddenError, InvalidCredentialsError, UnauthenticatedError
from travel_agency.domain.schemas import SessionContext
from travel_agency.repos.user_repo import UserRepo
from travel_agency.services.session_store import SessionStore
from travel_agency.utils.security import verify_password
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    """
    Logowanie / wylogowanie i bramki (auth, rola).
    Stan sesji tylko w SessionStore, handler dostaje SessionContext jawnie.
    """

    def __init__(self, db: Session, sessions: SessionStore):
        self.repo = UserRepo(db)
        self.sessions = sessions

    def login(self, username: str, password: str) -> SessionContext:
        user = self.repo.get_by_username((username or "").strip())

        # ten sam blad dla nieznanego loginu i zlego hasla
        if not user or not password or not verify_password(password, user.password_hash):
            logger.info(f"Failed login attempt for '{username}'")
            raise InvalidCredentialsError()

        session = self.sessions.create(user.id, user.username, user.role)
        logger.info(f"User {user.id} logged in")
        return session

    def logout(self, token: str | None) -> None:
        self.sessions.destroy(token)

    def current_session(self, token: str | None) -> SessionContext | None:
        return self.sessions.get(token)

    def refresh_session(self, session: SessionContext, username: str) -> SessionContext:
        updated = session.model_copy(update={"username": username})
        self.sessions.update(updated)
        return updated


def require_auth(session: SessionContext | None) -> int:
    if session is None:
        raise UnauthenticatedError()
    return session.user_id


def require_role(session: SessionContext | None, role: str) -> None:
    require_auth(session)
    if session.role != role:
        raise ForbiddenError(f"Role '{role}' required")
