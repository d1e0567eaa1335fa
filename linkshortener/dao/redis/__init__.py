from linkshortener.dao.redis.redis_key_schema import RedisKeySchema
from linkshortener.dao.redis.mixins import RedisClientMixin
from linkshortener.dao.redis.registry_redis_dao import RegistryRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'RegistryRedisDAO',
]
