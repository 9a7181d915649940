"""Abstract base class for URL record data access objects (DAOs).

This class establishes the narrow contract URLStore needs from a backing
store, regardless of the underlying storage mechanism (e.g., Redis, MongoDB).
The store only offers single-record atomicity, so every method maps to one
atomic round-trip.

Responsibilities:
    - Insert a record only if its key is not taken yet.
    - Find a record by key, filtered by expiration.
    - Atomically increment a numeric field of an existing record.
    - Classify its own errors as uniqueness violations (or not).

Example:
    Typical usage with a datastore-specific implementation:

        >>> from datetime import datetime, UTC
        >>> from urlstore.models import URLRecordModel
        >>> from urlstore.dao.redis import URLRecordRedisDAO

        >>> dao = URLRecordRedisDAO(...)

        >>> record = URLRecordModel(key="a1b2c3d", url="https://example.com/blog/article-123")
        >>> dao.insert(record)

        >>> dao.find("a1b2c3d", now=datetime.now(UTC)).url
        'https://example.com/blog/article-123'

        >>> dao.increment("a1b2c3d")
        1
"""

from abc import ABC, abstractmethod
from datetime import datetime

from urlstore.models import URLRecordModel


class URLRecordBaseDAO(ABC):
    """Interface for URL record data access objects (DAOs).

    Methods:
        insert(record: URLRecordModel, **kwargs) -> URLRecordBaseDAO:
            Insert a new record unless its key already exists.
            Raises a uniqueness error recognised by is_unique_violation().
            Raises DataStoreError on connection or write failure.

        is_unique_violation(error: BaseException) -> bool:
            Tell whether an error raised by insert() is a uniqueness violation.

        find(key: str, now: datetime, **kwargs) -> URLRecordModel | None:
            Retrieve the record with the given key if it is not expired at `now`.
            Raises DataStoreError on connection or read failure.

        increment(key: str, field: str = 'count', delta: int = 1, **kwargs) -> int:
            Atomically add `delta` to a field of an existing record.
            Raises KeyNotFoundError if the record does not exist.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., URLRecordRedisDAO) must
        extend this class and implement all abstract methods.

    NOTE:
        - Records are never deleted. Expiration is a read-time filter.
    """

    @abstractmethod
    def insert(self, record: URLRecordModel, **kwargs) -> 'URLRecordBaseDAO':
        """Insert a new record into the data store if its key is free.

        Args:
            record (URLRecordModel):
                The record to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordBaseDAO: self (for method chaining)

        Raises:
            Exception:
                A data store specific uniqueness error, for which
                is_unique_violation() returns True.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def is_unique_violation(self, error: BaseException) -> bool:
        """Return True if `error` reports a uniqueness constraint violation."""
        pass

    @abstractmethod
    def find(self, key: str, now: datetime, **kwargs) -> URLRecordModel | None:
        """Retrieve a record by key, applying the expiry filter.

        A record passes the filter when it has no expire_time or when
        expire_time >= now.

        Args:
            key (str):
                Stored key of the record (reserved keys include their marker).

            now (datetime):
                Reference moment for the expiry filter.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecordModel | None: the record, or None if absent or expired.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment(self, key: str, field: str = 'count', delta: int = 1, **kwargs) -> int:
        """Atomically increment a numeric field of an existing record.

        The expiry filter is NOT applied: expired records are incremented too.

        Args:
            key (str):
                Stored key of the record.

            field (str):
                Name of the numeric field. Defaults to 'count'.

            delta (int):
                Amount to add. Defaults to 1.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The field value after the increment.

        Raises:
            KeyNotFoundError:
                If no record with the given key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
