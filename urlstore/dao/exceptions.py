"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    KeyNotFoundError:
        Raised when no record matches a key (or the matching record is expired).

    DuplicateKeyError:
        Raised when a caller-supplied key is already taken.

    KeyAssignmentExhaustedError:
        Raised when every generated key collided with an existing record.

    UniqueConstraintViolationError:
        Raised by a data store when an insert would duplicate a unique field.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    OperationTimeoutError:
        Raised when the caller's time budget runs out between data store round-trips.

Example:
    >>> from urlstore.dao.exceptions import KeyNotFoundError
    >>> raise KeyNotFoundError("URL record with key 'abc123' not found.")
    Traceback (most recent call last):
        ...
    urlstore.dao.exceptions.KeyNotFoundError: URL record with key 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class KeyNotFoundError(DAOError):
    """Exception raised when a key does not exist or its record has expired."""

    pass


class DuplicateKeyError(DAOError):
    """Exception raised when a caller-supplied key already exists in the data store."""

    pass


class KeyAssignmentExhaustedError(DAOError):
    """Exception raised when no free generated key was found within the attempt limit."""

    pass


class UniqueConstraintViolationError(DAOError):
    """Exception raised when an insert violates a uniqueness constraint.

    Attributes:
        field (str): name of the unique field that was duplicated.
    """

    def __init__(self, message: str, field: str = 'key'):
        super().__init__(message)
        self.field = field


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, malformed records, etc.
    """

    pass


class OperationTimeoutError(DataStoreError):
    """Exception raised when an operation exceeds the caller-supplied timeout."""

    pass
