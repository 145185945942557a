from typing import List, Optional, Sequence

from shared.constants import TrackerKeys
from tracker_reader.domain.models import CountFilter, Granularity


class KeyBuilder:
    """Renders tracker keys for one namespace/app pair.

    ``{namespace}_{app_id}:[{event_id}:]{segment}:...``. Segment contents are
    not validated; callers keep ``:`` out of ids and dimension values.
    """

    def __init__(self, namespace: str, app_id: str):
        self.namespace = namespace
        self.app_id = app_id

    def build(self, segments: Sequence[str], event_id: Optional[str] = None) -> str:
        parts = list(segments)
        if event_id is not None:
            parts.insert(0, str(event_id))
        parts.insert(0, TrackerKeys.prefix(self.namespace, self.app_id))
        return TrackerKeys.SEGMENT_SEPARATOR.join(parts)

    @staticmethod
    def counter_segments(granularity: Granularity, filters: CountFilter) -> List[str]:
        """Trailing segments of a counter key, in wire order."""
        time_segment = granularity.value
        if granularity.dated and filters.date is not None:
            time_segment = TrackerKeys.dimension(time_segment, filters.date)

        segments = [time_segment]
        if filters.user is not None:
            segments.append(TrackerKeys.dimension(TrackerKeys.USER, filters.user))
        if filters.oid is not None:
            segments.append(TrackerKeys.dimension(TrackerKeys.OBJECT, filters.oid))
        segments.append(
            TrackerKeys.dimension(
                TrackerKeys.ENV,
                filters.env if filters.env is not None else TrackerKeys.ALL,
            )
        )
        segments.append(TrackerKeys.COUNTS)
        return segments

    def counter_key(
        self, event_id: str, granularity: Granularity, filters: CountFilter
    ) -> str:
        return self.build(self.counter_segments(granularity, filters), event_id)
