from contextlib import contextmanager
from typing import Dict, List, Optional

from tracker_reader.core.logger import get_logger
from tracker_reader.domain.buckets import BucketDate, bucket_label
from tracker_reader.domain.models import CountFilter, CountSnapshot, Granularity
from tracker_reader.infrastructure.redis.reader import CounterReader

from shared.constants import TrackerKeys

from .metrics import READ_ERRORS, READ_LATENCY, READS

logger = get_logger(__name__)


class CounterService:
    """Instrumented facade over a CounterReader for the HTTP layer.

    Adds read metrics and structured logs; key layout and value decoding stay
    in the reader.
    """

    def __init__(self, reader: CounterReader):
        self.reader = reader

    def list_events(self) -> List[str]:
        with self._observe("events"):
            return sorted(self.reader.get_captured_events())

    def event_objects(self, event_id: str) -> Dict[str, str]:
        with self._observe("objects"):
            return self.reader.get_event_objects(event_id)

    def event_envs(self, event_id: str) -> Dict[str, str]:
        with self._observe("envs"):
            return self.reader.get_event_envs(event_id)

    def count(
        self,
        granularity: Granularity,
        event_id: str = TrackerKeys.ALL,
        date: Optional[BucketDate] = None,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> CountSnapshot:
        filters = CountFilter(
            date=bucket_label(granularity, date), user=user, oid=oid, env=env
        )
        operation = "unique" if filters.unique else "count"
        with self._observe(operation):
            value = self.reader.resolve_count(event_id, granularity, filters)
        return CountSnapshot(
            event_id=event_id,
            granularity=granularity,
            date=filters.date,
            user=filters.user,
            oid=filters.oid,
            env=filters.env or TrackerKeys.ALL,
            unique=filters.unique,
            value=value,
        )

    @contextmanager
    def _observe(self, operation: str):
        READS.labels(operation=operation).inc()
        with READ_LATENCY.labels(operation=operation).time():
            try:
                yield
            except Exception as exc:
                READ_ERRORS.labels(operation=operation).inc()
                logger.warning(
                    "counter_read_failed",
                    extra={
                        "operation": operation,
                        "error_type": type(exc).__name__,
                        "app_id": self.reader.app_id,
                        "error": str(exc),
                    },
                )
                raise
