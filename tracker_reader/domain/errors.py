"""Errors raised by the tracker reader.

Store faults are not wrapped: ``StoreError`` is redis-py's own base error so
callers can catch connection and protocol failures without a translation
layer in between.
"""

from redis.exceptions import RedisError as StoreError


class TrackerReaderError(Exception):
    """Base class for reader errors."""


class ConfigError(TrackerReaderError):
    """Invalid construction arguments (app id, namespace, store client)."""


class BucketError(TrackerReaderError, ValueError):
    """A date cannot be rendered as a bucket label for the granularity."""


class ParseError(TrackerReaderError):
    """A stored counter exists but is not a non-negative integer."""

    def __init__(self, key: str, value: object):
        super().__init__(f"Counter at {key!r} is not a non-negative integer: {value!r}")
        self.key = key
        self.value = value


__all__ = [
    "TrackerReaderError",
    "ConfigError",
    "BucketError",
    "ParseError",
    "StoreError",
]
