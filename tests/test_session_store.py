from travel_agency.domain.schemas import SessionContext, SessionData


def test_create_and_get(session_store):
    session = session_store.create(7, "alice", "client")

    loaded = session_store.get(session.token)
    assert loaded == SessionContext(token=session.token, user_id=7, username="alice", role="client")
    assert session_store.redis.ttl(f"session:{session.token}") > 0


def test_tokens_are_unique(session_store):
    first = session_store.create(1, "alice", "client")
    second = session_store.create(1, "alice", "client")

    assert first.token != second.token


def test_unknown_or_missing_token(session_store):
    assert session_store.get("does-not-exist") is None
    assert session_store.get(None) is None


def test_destroy(session_store):
    session = session_store.create(1, "alice", "client")

    session_store.destroy(session.token)
    session_store.destroy(session.token)

    assert session_store.get(session.token) is None


def test_update_does_not_resurrect_destroyed_session(session_store):
    session = session_store.create(1, "alice", "client")
    session_store.destroy(session.token)

    session_store.update(session.model_copy(update={"username": "alicia"}))

    assert session_store.get(session.token) is None


def test_stored_value_is_session_data_without_token(session_store):
    session = session_store.create(3, "bob", "admin")

    raw = session_store.redis.get(f"session:{session.token}")

    assert SessionData.model_validate_json(raw) == SessionData(user_id=3, username="bob", role="admin")
    assert session.token not in raw
