from unittest.mock import MagicMock

import fakeredis
import pytest
from tracker_reader.infrastructure.redis.reader import CounterReader
from tracker_reader.infrastructure.redis.store import REQUIRED_OPERATIONS


@pytest.fixture
def fake_redis():
    """Isolated in-memory Redis per test."""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def reader(fake_redis):
    return CounterReader(fake_redis, 42)


@pytest.fixture
def mock_store():
    """Store client double recording every call."""
    store = MagicMock(spec=list(REQUIRED_OPERATIONS))
    store.get.return_value = None
    store.bitcount.return_value = 0
    store.smembers.return_value = set()
    store.hgetall.return_value = {}
    return store


@pytest.fixture
def mock_reader(mock_store):
    return CounterReader(mock_store, 42)
