import re
from typing import Dict, Optional, Sequence, Set, Union

from shared.constants import TrackerKeys
from shared.logging.logger import get_logger
from tracker_reader.domain.buckets import BucketDate, bucket_label
from tracker_reader.domain.errors import ConfigError, ParseError
from tracker_reader.domain.models import CountFilter, Granularity

from .keys import KeyBuilder
from .store import StoreClient, missing_operations

logger = get_logger(__name__, auto_configure=False)

_COUNTER_RE = re.compile(r"[0-9]+")


def _text(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


class CounterReader:
    """Typed reads over the tracker keyspace of one app.

    Notes:
        - Every call is a single store round trip; nothing is cached.
        - ``user="unique"`` counters are bitmaps read with BITCOUNT, every
          other counter is a plain integer read with GET.
        - Store errors propagate unchanged.
    """

    def __init__(
        self,
        client: StoreClient,
        app_id: Union[str, int],
        namespace: str = TrackerKeys.DEFAULT_NAMESPACE,
    ):
        if client is None:
            raise ConfigError("A store client is required")
        missing = missing_operations(client)
        if missing:
            raise ConfigError(
                f"Store client {type(client).__name__} lacks: {', '.join(missing)}"
            )
        if app_id is None or not str(app_id).strip():
            raise ConfigError("app_id must be a non-empty value")
        if not namespace:
            raise ConfigError("namespace must be a non-empty string")

        self._client = client
        self._keys = KeyBuilder(namespace, str(app_id))

    @property
    def app_id(self) -> str:
        return self._keys.app_id

    @property
    def namespace(self) -> str:
        return self._keys.namespace

    def build_key(self, segments: Sequence[str], event_id: Optional[str] = None) -> str:
        return self._keys.build(segments, event_id)

    # Collections
    def get_captured_events(self) -> Set[str]:
        key = self.build_key([TrackerKeys.EVENTS])
        return {_text(m) for m in self._client.smembers(key)}

    def get_event_objects(self, event_id: str) -> Dict[str, str]:
        return self._hashed(event_id, TrackerKeys.OBJECTS)

    def get_event_envs(self, event_id: str) -> Dict[str, str]:
        return self._hashed(event_id, TrackerKeys.ENVIRONMENTS)

    # Counters
    def counter_key(
        self,
        event_id: str,
        granularity: Union[Granularity, str],
        filters: Optional[CountFilter] = None,
    ) -> str:
        return self._keys.counter_key(
            event_id, Granularity(granularity), filters or CountFilter()
        )

    def resolve_count(
        self,
        event_id: str,
        granularity: Union[Granularity, str],
        filters: Optional[CountFilter] = None,
    ) -> int:
        filters = filters or CountFilter()
        key = self.counter_key(event_id, granularity, filters)

        if filters.unique:
            value = int(self._client.bitcount(key))
        else:
            value = self._parse_counter(key, self._client.get(key))

        logger.debug(
            "counter_read",
            extra={"counter": key, "unique": filters.unique, "value": value},
        )
        return value

    # Per-event counts
    def get_event_hour_counts(
        self,
        event_id: str,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.HOUR, date, user, oid, env)

    def get_event_day_counts(
        self,
        event_id: str,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.DAY, date, user, oid, env)

    def get_event_week_counts(
        self,
        event_id: str,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.WEEK, date, user, oid, env)

    def get_event_month_counts(
        self,
        event_id: str,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.MONTH, date, user, oid, env)

    def get_event_year_counts(
        self,
        event_id: str,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.YEAR, date, user, oid, env)

    def get_event_total_counts(
        self,
        event_id: str,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self._counts(event_id, Granularity.TOTAL, None, user, oid, env)

    # Whole-app counts
    def get_app_hour_counts(
        self,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_hour_counts(
            TrackerKeys.ALL, date, user=user, oid=oid, env=env
        )

    def get_app_day_counts(
        self,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_day_counts(
            TrackerKeys.ALL, date, user=user, oid=oid, env=env
        )

    def get_app_week_counts(
        self,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_week_counts(
            TrackerKeys.ALL, date, user=user, oid=oid, env=env
        )

    def get_app_month_counts(
        self,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_month_counts(
            TrackerKeys.ALL, date, user=user, oid=oid, env=env
        )

    def get_app_year_counts(
        self,
        date: Optional[BucketDate] = None,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_year_counts(
            TrackerKeys.ALL, date, user=user, oid=oid, env=env
        )

    def get_app_total_counts(
        self,
        *,
        user: Optional[str] = None,
        oid: Optional[str] = None,
        env: Optional[str] = None,
    ) -> int:
        return self.get_event_total_counts(TrackerKeys.ALL, user=user, oid=oid, env=env)

    # Internals
    def _counts(
        self,
        event_id: str,
        granularity: Granularity,
        date: Optional[BucketDate],
        user: Optional[str],
        oid: Optional[str],
        env: Optional[str],
    ) -> int:
        filters = CountFilter(
            date=bucket_label(granularity, date), user=user, oid=oid, env=env
        )
        return self.resolve_count(event_id, granularity, filters)

    def _hashed(self, event_id: str, field: str) -> Dict[str, str]:
        key = self.build_key([TrackerKeys.HASHED, field], event_id)
        return {_text(k): _text(v) for k, v in self._client.hgetall(key).items()}

    @staticmethod
    def _parse_counter(key: str, raw: object) -> int:
        if raw is None:
            return 0
        if isinstance(raw, int) and not isinstance(raw, bool) and raw >= 0:
            return raw
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        if isinstance(raw, str) and _COUNTER_RE.fullmatch(raw):
            return int(raw)
        raise ParseError(key, raw)
