"""Read-side accessor for time-bucketed tracker counters stored in Redis."""

from tracker_reader.domain.errors import (
    BucketError,
    ConfigError,
    ParseError,
    StoreError,
    TrackerReaderError,
)
from tracker_reader.domain.models import CountFilter, Granularity
from tracker_reader.infrastructure.redis.reader import CounterReader

__all__ = [
    "CounterReader",
    "CountFilter",
    "Granularity",
    "TrackerReaderError",
    "BucketError",
    "ConfigError",
    "ParseError",
    "StoreError",
]
