"""Date bucket labels for dated granularities.

hour ``YYYYMMDDHH``, day ``YYYYMMDD``, week ``YYYYWW`` (ISO year and week),
month ``YYYYMM``, year ``YYYY``.
"""

from datetime import date, datetime
from typing import Optional, Union

from .errors import BucketError
from .models import Granularity

BucketDate = Union[str, int, date, datetime]

_FORMATS = {
    Granularity.HOUR: "%Y%m%d%H",
    Granularity.DAY: "%Y%m%d",
    Granularity.MONTH: "%Y%m",
    Granularity.YEAR: "%Y",
}


def bucket_label(
    granularity: Granularity, when: Optional[BucketDate]
) -> Optional[str]:
    if when is None or granularity is Granularity.TOTAL:
        return None
    if isinstance(when, (str, int)):
        return str(when)
    if granularity is Granularity.WEEK:
        iso_year, iso_week, _ = when.isocalendar()
        return f"{iso_year:04d}{iso_week:02d}"
    if granularity is Granularity.HOUR and not isinstance(when, datetime):
        raise BucketError("hour buckets need a datetime, got a date")
    return when.strftime(_FORMATS[granularity])
