"""Redis client wiring shared by Redis-backed registry mirrors.

Classes:
    RedisClientMixin: builds (or adopts) the client, the key schema and
    pings the server once on construction.

Example:
    >>> class RegistryRedisDAO(RedisClientMixin, RegistryBaseDAO):
    ...     pass
    ...
    >>> dao = RegistryRedisDAO(redis_host='cache.local', prefix='linkshortener:local')
"""

import redis

from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.redis.helpers import datastore_error


class RedisClientMixin:
    """Client setup for Redis-backed mirrors

    Connection parameters mirror the `redis` section of the config document
    with a `redis_` prefix, so `create_dao()` can splat it straight in.

    Attributes:
        redis (redis.Redis): client used for the snapshot key.
        keys (RedisKeySchema): namespaced key names.

    Raises:
        DataStoreError: if the initial PING fails for any Redis reason.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int = 6379,
        redis_db: int = 0,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None:
            # Snapshots are JSON text; decode_responses keeps GET results as str
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                username=redis_username,
                password=redis_password,
                decode_responses=True,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)
        self._healthcheck()

    def _healthcheck(self) -> None:
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            raise datastore_error(self.redis, e) from e
