"""Redis client management."""

import redis.asyncio as redis
from redis.exceptions import RedisError

from core.exceptions import StoreError


def create_redis_client(url: str) -> redis.Redis:
    """Create the process-wide Redis client.

    The client is safe for concurrent use by every in-flight request and is
    kept open for the lifetime of the application.
    """
    return redis.from_url(url, decode_responses=True)


async def check_connection(client: redis.Redis) -> None:
    """Ping the store.

    Raises:
        StoreError: If the store cannot be reached.
    """
    try:
        await client.ping()
    except RedisError as e:
        raise StoreError(f"store unreachable: {e}") from e
