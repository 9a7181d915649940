import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable, Mapping

from urlstore.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def describe_connection(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for the client's connection pool."""
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_connection_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connection errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            redis.exceptions.ConnectionError or redis.exceptions.TimeoutError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... def find(self, key):
        ...     return self.redis.hgetall(key)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out talking to Redis at {describe_connection(self.redis)}.') from e
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {describe_connection(self.redis)}.") from e

    return wrapper


def decode_hash(data: Mapping[Any, Any]) -> dict[str, str]:
    """Decode a HGETALL reply into a str -> str dictionary.

    Handles clients created both with and without decode_responses.
    """

    def _text(value: Any) -> str:
        return value.decode('utf-8') if isinstance(value, bytes) else str(value)

    return {_text(field): _text(value) for field, value in data.items()}
