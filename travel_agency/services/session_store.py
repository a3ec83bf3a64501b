import secrets

import redis
from travel_agency.domain.schemas import SessionContext, SessionData
from travel_agency.utils.retry import redis_retry
from travel_agency.utils.settings import REDIS_URL, SESSION_TTL_SECONDS
from travel_agency.utils.logging import get_logger

logger = get_logger(__name__)


class SessionStore:
    """
    -sesje po stronie serwera, klucz to losowy token z cookie
    -wartosc: SessionData jako json {user_id, username, role}
    -TTL w redisie, kazdy odczyt przedluza sesje
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None, ttl: int = SESSION_TTL_SECONDS):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl

    @staticmethod
    def _key(token: str) -> str:
        return f"session:{token}"

    @redis_retry()
    def create(self, user_id: int, username: str, role: str) -> SessionContext:
        session = SessionContext(token=secrets.token_urlsafe(32), user_id=user_id, username=username, role=role)
        #SET session:<token> "{...}" EX <ttl>
        self.redis.set(
            name=self._key(session.token),
            value=session.model_dump_json(exclude={"token"}),
            ex=self.ttl,
        )
        logger.info(f"Session created for user {user_id}")
        return session

    @redis_retry()
    def get(self, token: str | None) -> SessionContext | None:
        if not token:
            return None

        raw = self.redis.get(self._key(token))
        if raw is None:
            return None

        self.redis.expire(self._key(token), self.ttl)
        data = SessionData.model_validate_json(raw)
        return SessionContext(token=token, **data.model_dump())

    @redis_retry()
    def update(self, session: SessionContext) -> None:
        #xx: nie wskrzeszaj sesji ktora juz wygasla
        self.redis.set(
            name=self._key(session.token),
            value=session.model_dump_json(exclude={"token"}),
            ex=self.ttl,
            xx=True,
        )

    @redis_retry()
    def destroy(self, token: str | None) -> None:
        if not token:
            return
        removed = self.redis.delete(self._key(token))
        if removed:
            logger.info("Session destroyed")
