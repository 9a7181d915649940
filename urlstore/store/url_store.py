"""URL record store: key assignment and record access

URLStore is the library boundary consumed by HTTP or CLI front-ends. It owns
no connection and no mutable state apart from the injected usage counters;
all mutation is delegated to atomic single-record DAO operations.

Operations:
    set(key, url, expire=None, count=0, *, timeout=None) -> str
        Insert a new record and return its final key.
    get(key) -> str
        Return the URL of a non-expired record. Counts as a fetch.
    count(key) -> int
        Return the visit count of a non-expired record.
    inc(key) -> None
        Increment the visit count of a record, expired or not.
    record(key) -> URLRecordModel
        Return the full non-expired record.

Key assignment:
    - No key (None or ''): a random key is generated. If it collides with an
      existing record a new one is generated, up to `max_attempts` inserts,
      then KeyAssignmentExhaustedError is raised.
    - Explicit key: stored as '$<key>'. A collision raises DuplicateKeyError
      right away.

Example:
    >>> store = URLStore(dao=URLRecordRedisDAO(prefix='urlstore:dev'))
    >>> key = store.set('', 'https://example.com')
    >>> store.get(key)
    'https://example.com'
    >>> store.inc(key)
    >>> store.count(key)
    1
    >>> store.set('docs', 'https://example.com/docs')
    '$docs'
"""

import time
import logging
from datetime import datetime, UTC
from typing import Optional

from beartype import beartype

from urlstore.constants import Keys
from urlstore.models import URLRecordModel
from urlstore.telemetry import Usage
from urlstore.dao.base import URLRecordBaseDAO
from urlstore.dao.exceptions import (
    DuplicateKeyError,
    KeyAssignmentExhaustedError,
    KeyNotFoundError,
    OperationTimeoutError,
)
from urlstore.utils.keys import generate_key, reserve_key


logger = logging.getLogger(__name__)


class URLStore:
    """Store and retrieve short key to URL mappings.

    Attributes:
        dao (URLRecordBaseDAO):
            Backing data store.
        usage (Usage):
            Inserted/fetched counters.
        key_length (int):
            Length of generated keys.
        max_attempts (int):
            Maximum number of inserts tried for a generated key.
    """

    def __init__(
        self,
        dao: URLRecordBaseDAO,
        usage: Optional[Usage] = None,
        key_length: int = Keys.DEFAULT_LENGTH,
        max_attempts: int = Keys.DEFAULT_MAX_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError(f'max_attempts must be a positive integer (given value: {max_attempts}).')

        self.dao = dao
        self.usage = usage if usage is not None else Usage()
        self.key_length = key_length
        self.max_attempts = max_attempts

    @beartype
    def set(
        self,
        key: str | None,
        url: str,
        expire: datetime | None = None,
        count: int = 0,
        *,
        timeout: int | float | None = None,
    ) -> str:
        """Save `url` under `key`, or under a generated key if `key` is empty.

        New records always start with a count of 0: the `count` argument is
        accepted for interface compatibility and ignored.

        Args:
            key (str | None):
                Caller-supplied key. None or '' generates one.
            url (str):
                Target URL. Not validated.
            expire (datetime | None):
                Expiration moment. None never expires.
            count (int):
                Ignored.
            timeout (int | float | None):
                Time budget in seconds for all insert attempts. Checked
                before every attempt. None disables the check.

        Returns:
            str: the final key, '$'-prefixed for caller-supplied keys.

        Raises:
            DuplicateKeyError: if the caller-supplied key is taken.
            KeyAssignmentExhaustedError: if every generated key collided.
            OperationTimeoutError: if the time budget ran out.
            DataStoreError: on any other data store failure.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        reserved = bool(key)

        for attempt in range(1, self.max_attempts + 1):
            if deadline is not None and time.monotonic() > deadline:
                raise OperationTimeoutError(f'Timed out assigning a key after {attempt - 1} attempt(s).')

            record = URLRecordModel(
                key=reserve_key(key) if reserved else generate_key(self.key_length),
                url=url,
                expire_time=expire,
                count=0,
            )

            try:
                self.dao.insert(record)
            except Exception as e:
                if not self.dao.is_unique_violation(e):
                    raise
                if reserved:
                    logger.warning('Reserved key is already taken.', extra={'key': record.key})
                    raise DuplicateKeyError(f"Key '{record.key}' already exists.") from e
                logger.info('Generated key collided, retrying.', extra={'key': record.key, 'attempt': attempt})
                continue

            self.usage.inserted_counter.inc()
            logger.debug('Stored URL record.', extra={'key': record.key, 'attempt': attempt})
            return record.key

        logger.warning('Could not assign a free generated key.', extra={'maxAttempts': self.max_attempts})
        raise KeyAssignmentExhaustedError(f'No free key found after {self.max_attempts} attempt(s).')

    @beartype
    def record(self, key: str) -> URLRecordModel:
        """Return the non-expired record stored under `key`.

        Raises:
            KeyNotFoundError: if no record matches or it has expired.
            DataStoreError: on any other data store failure.
        """
        record = self.dao.find(key, now=datetime.now(UTC))
        if record is None:
            raise KeyNotFoundError(f"Key '{key}' does not exist or has expired.")
        return record

    @beartype
    def get(self, key: str) -> str:
        """Return the URL stored under `key` and count the fetch."""
        url = self.record(key).url
        self.usage.fetched_counter.inc()
        return url

    @beartype
    def count(self, key: str) -> int:
        """Return the visit count stored under `key`."""
        return self.record(key).count

    @beartype
    def inc(self, key: str) -> None:
        """Increment the visit count of `key` by one.

        Expired records are incremented too.

        Raises:
            KeyNotFoundError: if the key does not exist.
            DataStoreError: on any other data store failure.
        """
        self.dao.increment(key, field='count', delta=1)
