import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from linkshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def redis_location(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' of the client's connection pool."""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def datastore_error(client: redis.Redis, error: redis.exceptions.RedisError) -> DataStoreError:
    """Translate a redis-py error into the DAO layer's DataStoreError."""
    if isinstance(error, redis.exceptions.ConnectionError):
        return DataStoreError(f"Can't connect to Redis at {redis_location(client)}.")
    return DataStoreError(f'Redis command failed at {redis_location(client)}: {error}')


def handle_redis_error(method: F) -> F:
    """Wrap registry DAO methods so every redis-py failure surfaces as DataStoreError

    Timeouts and server-side errors are translated along with lost connections.

    Example:
        >>> @handle_redis_error
        ... def load(self):
        ...     return self.redis.get('shortened_urls')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.RedisError as e:
            raise datastore_error(self.redis, e) from e

    return wrapper
