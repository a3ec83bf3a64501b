# travel_agency/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import redis


class ConflictError(Exception):
    """Concurrent write lost a unique-constraint race; the operation can be replayed."""


def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(redis.RedisError),
    )


def conflict_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=0.01, min=0.01, max=0.2),
        retry=retry_if_exception_type(ConflictError),
    )
