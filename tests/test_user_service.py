import pytest

from travel_agency.data.models import UserModel
from travel_agency.domain.errors import DuplicateUsernameError, InvalidCredentialsError, InvalidInputError
from travel_agency.services.auth_service import AuthService
from travel_agency.services.user_service import UserService


class TestRegister:

    def test_password_is_stored_hashed(self, db):
        user = UserService(db).register("carol", "plain-text")

        stored = db.get(UserModel, user.id)
        assert stored.password_hash != "plain-text"
        assert stored.password_hash.startswith("$2")
        assert user.role == "client"

    @pytest.mark.parametrize("username,password", [("", "pw"), ("   ", "pw"), ("dave", "")])
    def test_empty_fields_are_rejected(self, db, username, password):
        with pytest.raises(InvalidInputError):
            UserService(db).register(username, password)

    def test_duplicate_username_keeps_existing_hash(self, db, alice):
        before = db.get(UserModel, alice.id).password_hash

        with pytest.raises(DuplicateUsernameError):
            UserService(db).register("alice", "another-password")

        db.expire_all()
        assert db.get(UserModel, alice.id).password_hash == before


class TestLogin:

    def test_login_creates_session(self, db, alice, session_store):
        session = AuthService(db, session_store).login("alice", "alice-secret")

        assert session.user_id == alice.id
        assert session_store.get(session.token).username == "alice"

    def test_wrong_password_and_unknown_user_look_the_same(self, db, alice, session_store):
        auth = AuthService(db, session_store)

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            auth.login("alice", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_user:
            auth.login("nobody", "alice-secret")

        assert str(wrong_password.value) == str(unknown_user.value)

    def test_logout_is_idempotent(self, db, alice, session_store):
        auth = AuthService(db, session_store)
        session = auth.login("alice", "alice-secret")

        auth.logout(session.token)
        auth.logout(session.token)

        assert auth.current_session(session.token) is None


class TestUpdateProfile:

    def test_new_password_replaces_old_one(self, db, alice, session_store):
        UserService(db).update_profile(alice.id, password="changed")
        auth = AuthService(db, session_store)

        assert auth.login("alice", "changed").user_id == alice.id
        with pytest.raises(InvalidCredentialsError):
            auth.login("alice", "alice-secret")

    def test_username_change_keeps_password_hash(self, db, alice):
        before = db.get(UserModel, alice.id).password_hash

        updated = UserService(db).update_profile(alice.id, username="alicia")

        assert updated.username == "alicia"
        assert db.get(UserModel, alice.id).password_hash == before

    def test_taken_username_is_rejected(self, db, alice, bob):
        with pytest.raises(DuplicateUsernameError):
            UserService(db).update_profile(alice.id, username="bob")
