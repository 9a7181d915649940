from urlstore.dao.redis.redis_key_schema import RedisKeySchema
from urlstore.dao.redis.mixins import RedisClientMixin
from urlstore.dao.redis.url_record_redis_dao import URLRecordRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'URLRecordRedisDAO',
]
