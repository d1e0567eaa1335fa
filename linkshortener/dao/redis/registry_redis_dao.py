"""Registry mirror stored in Redis

The whole record set is serialized into one JSON string under a single
namespaced key (`<prefix>:shortened_urls`). Every save overwrites it.

Classes:
    RegistryRedisDAO:
        DAO for mirroring UrlRecordModel collections into a Redis datastore.

Example:
    >>> from linkshortener.dao.redis import RegistryRedisDAO

    >>> dao = RegistryRedisDAO(prefix="linkshortener:dev")
    >>> dao.save([record])
    <RegistryRedisDAO>
    >>> [r.shortcode for r in dao.load()]
    ['abc123']
"""

from collections.abc import Iterable

from beartype import beartype

from linkshortener.models import UrlRecordModel
from linkshortener.dao.base import RegistryBaseDAO
from linkshortener.dao.codec import dump_records, load_records
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.helpers import handle_redis_error


class RegistryRedisDAO(RedisClientMixin, RegistryBaseDAO):
    """Redis-based registry mirror

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        save(records: Iterable[UrlRecordModel], **kwargs) -> RegistryRedisDAO:
            SET the snapshot key to the JSON encoded record set.
            Raises DataStoreError on any redis-py error.

        load(**kwargs) -> list[UrlRecordModel]:
            GET and decode the snapshot key ([] when missing).
            Raises SnapshotDecodeError on malformed snapshots.
            Raises DataStoreError on any redis-py error.
    """

    @handle_redis_error
    @beartype
    def save(self, records: Iterable[UrlRecordModel], **kwargs) -> 'RegistryRedisDAO':
        self.redis.set(self.keys.registry_key(), dump_records(records))
        return self

    @handle_redis_error
    @beartype
    def load(self, **kwargs) -> list[UrlRecordModel]:
        payload = self.redis.get(self.keys.registry_key())
        if payload is None:
            return []
        return load_records(payload)
