"""Data Access Object (DAO) implementation for URL records in Redis

This module provides a Redis-based implementation of URLRecordBaseDAO.

Each record lives in a single Redis hash, so every operation touches exactly
one Redis key:

    <prefix>:urls:<key>  ->  {url: <target>, count: <visits>, expire_time: <ISO-8601 UTC>}

`expire_time` is only written when the record expires. Records are never
deleted; expiration is a read-time filter.

Responsibilities:
    - Insert records only when the key is free (atomic Lua script);
    - Find records by key and filter expired ones;
    - Atomically increment the visit counter of existing records (atomic Lua script);
    - Translate Redis connectivity failures into DAO exceptions.

Classes:
    URLRecordRedisDAO:
        DAO for storing and retrieving URLRecordModel in a Redis datastore.

Example:
    >>> from datetime import datetime, UTC
    >>> from urlstore.models import URLRecordModel
    >>> from urlstore.dao.redis import URLRecordRedisDAO

    >>> dao = URLRecordRedisDAO(prefix="urlstore:dev")
    >>> dao.insert(URLRecordModel(key="abc123x", url="https://example.com/page"))
    <URLRecordRedisDAO>

    >>> dao.find("abc123x", now=datetime.now(UTC)).url
    'https://example.com/page'
    >>> dao.increment("abc123x")
    1
"""

import logging
from datetime import datetime

from beartype import beartype

from urlstore.models import URLRecordModel
from urlstore.models.url_record_model import as_utc
from urlstore.dao.base import URLRecordBaseDAO
from urlstore.dao.redis.mixins import RedisClientMixin
from urlstore.dao.redis.helpers import handle_redis_connection_error, decode_hash
from urlstore.dao.exceptions import DataStoreError, KeyNotFoundError, UniqueConstraintViolationError


logger = logging.getLogger(__name__)


# KEYS[1] = record key, ARGV = flat field/value pairs
# Returns 1 when the record was created, 0 when the key is taken.
INSERT_RECORD_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return 0
end
redis.call('HSET', KEYS[1], unpack(ARGV))
return 1
"""

# KEYS[1] = record key, ARGV[1] = field, ARGV[2] = delta
# Returns the incremented value, or nil when the record does not exist.
INCREMENT_FIELD_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
    return nil
end
return redis.call('HINCRBY', KEYS[1], ARGV[1], ARGV[2])
"""


class URLRecordRedisDAO(RedisClientMixin, URLRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for URL records

    This class implements the URLRecordBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(record: URLRecordModel, **kwargs) -> URLRecordRedisDAO:
            Insert a record if its key is free.
            Raises UniqueConstraintViolationError when the key already exists.
            Raises DataStoreError on connectivity issues with Redis.

        is_unique_violation(error: BaseException) -> bool:
            True for UniqueConstraintViolationError on the 'key' field.

        find(key: str, now: datetime, **kwargs) -> URLRecordModel | None:
            Retrieve a record unless it is missing or expired at `now`.
            Raises DataStoreError on connectivity issues or malformed records.

        increment(key: str, field: str = 'count', delta: int = 1, **kwargs) -> int:
            Atomically increment a numeric field of an existing record.
            Raises KeyNotFoundError when the key doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._insert_script = self.redis.register_script(INSERT_RECORD_SCRIPT)
        self._increment_script = self.redis.register_script(INCREMENT_FIELD_SCRIPT)

    @handle_redis_connection_error
    @beartype
    def insert(self, record: URLRecordModel, **kwargs) -> 'URLRecordRedisDAO':
        """Insert a URL record into Redis unless its key is taken

        The existence check and the write happen inside a single Lua script,
        so two concurrent inserts of the same key can never both succeed.

        Args:
            record (URLRecordModel):
                Record to persist.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordRedisDAO: self (for method chaining)

        Raises:
            UniqueConstraintViolationError:
                If a record with the same key already exists.
            DataStoreError:
                If a Redis connection issue occurs.

        Example:
            >>> dao.insert(URLRecordModel(key='$docs', url='https://example.com'))
            <URLRecordRedisDAO>
        """
        record_key = self.keys.record_key(record.key)
        created = self._insert_script(keys=[record_key], args=self._encode(record))
        if not created:
            raise UniqueConstraintViolationError(f"URL record with key '{record.key}' already exists.", field='key')

        logger.debug('Inserted URL record.', extra={'recordKey': record_key})
        return self

    def is_unique_violation(self, error: BaseException) -> bool:
        return isinstance(error, UniqueConstraintViolationError) and error.field == 'key'

    @handle_redis_connection_error
    @beartype
    def find(self, key: str, now: datetime, **kwargs) -> URLRecordModel | None:
        """Retrieve a stored URL record by key, filtered by expiration

        Args:
            key (str):
                Stored key of the record.
            now (datetime):
                Reference moment for the expiry filter (inclusive).
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecordModel | None:
                The record, or None if it does not exist or has expired.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur or the stored hash is malformed.

        Example:
            >>> dao.find('$docs', now=datetime.now(UTC))
            URLRecordModel(key='$docs', url='https://example.com', expire_time=None, count=0)
        """
        data = self.redis.hgetall(self.keys.record_key(key))
        if not data:
            return None

        record = self._decode(key, decode_hash(data))
        if record.is_expired(now):
            logger.debug('URL record is expired.', extra={'key': key, 'expireTime': record.expire_time.isoformat()})
            return None
        return record

    @handle_redis_connection_error
    @beartype
    def increment(self, key: str, field: str = 'count', delta: int = 1, **kwargs) -> int:
        """Atomically increment a numeric field of an existing URL record

        NOTE: expired records are incremented as well, the expiry filter
              only applies to reads.

        Args:
            key (str):
                Stored key of the record.
            field (str):
                Hash field to increment. Defaults to 'count'.
            delta (int):
                Amount to add. Defaults to 1.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int:
                Field value after the increment.

        Raises:
            KeyNotFoundError:
                If no record with the given key exists.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.increment('$docs')
            1
        """
        value = self._increment_script(keys=[self.keys.record_key(key)], args=[field, delta])
        if value is None:
            raise KeyNotFoundError(f"URL record with key '{key}' not found.")
        return int(value)

    @staticmethod
    def _encode(record: URLRecordModel) -> list[str]:
        fields = ['url', record.url, 'count', str(record.count)]
        if record.expire_time is not None:
            fields += ['expire_time', as_utc(record.expire_time).isoformat()]
        return fields

    @staticmethod
    def _decode(key: str, data: dict[str, str]) -> URLRecordModel:
        try:
            expire_time = data.get('expire_time')
            return URLRecordModel(
                key=key,
                url=data['url'],
                expire_time=None if not expire_time else as_utc(datetime.fromisoformat(expire_time)),
                count=int(data.get('count', 0)),
            )
        except (KeyError, ValueError) as e:
            raise DataStoreError(f"Malformed URL record stored under key '{key}'.") from e
