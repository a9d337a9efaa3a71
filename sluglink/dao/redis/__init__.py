from sluglink.dao.redis.redis_key_schema import RedisKeySchema
from sluglink.dao.redis.short_url_redis_dao import ShortURLRedisDAO
from sluglink.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortURLRedisDAO',
    'RedisClientMixin',
]
