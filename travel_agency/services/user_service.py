from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from travel_agency.data.models.user import UserModel, ROLE_CLIENT
from travel_agency.domain.errors import DuplicateUsernameError, InvalidInputError, NotFoundError
from travel_agency.domain.schemas import UserRead
from travel_agency.repos.user_repo import UserRepo
from travel_agency.utils.security import hash_password
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, username: str, password: str, role: str = ROLE_CLIENT) -> UserRead:
        username = (username or "").strip()
        if not username or not password:
            raise InvalidInputError("Username and password are required")

        if self.repo.get_by_username(username):
            raise DuplicateUsernameError(username)

        #hash jawnie tutaj, haslo w plaintext nie wychodzi poza ta metode
        user = UserModel(username=username, password_hash=hash_password(password), role=role)
        try:
            created = self.repo.create_user(user)
        except IntegrityError as e:
            #rownolegla rejestracja tego samego loginu
            self.repo.rollback()
            raise DuplicateUsernameError(username) from e

        logger.info(f"User {created.id} '{created.username}' registered with role {created.role}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)

    def update_profile(self, user_id: int, username: str | None = None, password: str | None = None) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")

        username = (username or "").strip()
        if username and username != user.username:
            other = self.repo.get_by_username(username)
            if other and other.id != user_id:
                raise DuplicateUsernameError(username)
            user.username = username

        #hash ruszamy tylko przy zmianie hasla
        if password:
            user.password_hash = hash_password(password)

        try:
            saved = self.repo.save(user)
        except IntegrityError as e:
            self.repo.rollback()
            raise DuplicateUsernameError(username) from e

        logger.info(f"Profile of user {user_id} updated (password changed: {bool(password)})")
        return UserRead.model_validate(saved)
