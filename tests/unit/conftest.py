import threading
from dataclasses import replace
from datetime import datetime
from unittest.mock import MagicMock

import pytest
import redis

from urlstore.models import URLRecordModel
from urlstore.dao.base import URLRecordBaseDAO
from urlstore.dao.exceptions import KeyNotFoundError, UniqueConstraintViolationError
from urlstore.telemetry import Usage


class InMemoryURLRecordDAO(URLRecordBaseDAO):
    """Dictionary-backed DAO with the same atomicity guarantees as the Redis DAO."""

    def __init__(self):
        self.records: dict[str, URLRecordModel] = {}
        self.lock = threading.Lock()

    def insert(self, record, **kwargs):
        with self.lock:
            if record.key in self.records:
                raise UniqueConstraintViolationError(f"URL record with key '{record.key}' already exists.", field='key')
            self.records[record.key] = record
        return self

    def is_unique_violation(self, error):
        return isinstance(error, UniqueConstraintViolationError)

    def find(self, key: str, now: datetime, **kwargs):
        record = self.records.get(key)
        if record is None or record.is_expired(now):
            return None
        return record

    def increment(self, key, field='count', delta=1, **kwargs):
        with self.lock:
            record = self.records.get(key)
            if record is None:
                raise KeyNotFoundError(f"URL record with key '{key}' not found.")
            value = getattr(record, field) + delta
            self.records[key] = replace(record, **{field: value})
        return value


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def memory_dao() -> InMemoryURLRecordDAO:
    return InMemoryURLRecordDAO()


@pytest.fixture
def usage() -> Usage:
    return Usage()


@pytest.fixture
def insert_script() -> MagicMock:
    """Mock of the registered insert-if-absent Lua script (1 = created)."""
    script = MagicMock()
    script.return_value = 1
    return script


@pytest.fixture
def increment_script() -> MagicMock:
    """Mock of the registered increment-if-exists Lua script."""
    script = MagicMock()
    script.return_value = 1
    return script


@pytest.fixture
def redis_client(insert_script, increment_script) -> redis.Redis:
    """Mock a Redis client with both Lua scripts registered."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.ping.return_value = True
    client.hgetall.return_value = {}
    client.register_script.side_effect = [insert_script, increment_script]
    return client
