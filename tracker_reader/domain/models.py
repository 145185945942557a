from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from shared.constants import TrackerKeys


class Granularity(str, Enum):
    """Time-bucket resolution of a counter; the value is the key token."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    TOTAL = "total"

    @property
    def dated(self) -> bool:
        return self is not Granularity.TOTAL


class CountFilter(BaseModel):
    """Optional date bucket and dimensions narrowing a counter query.

    Fields:
        date: Bucket label matching the granularity (e.g. ``20240115`` for day).
        user: User dimension; ``"unique"`` selects the unique-visitor bitmap.
        oid: Object id dimension.
        env: Environment dimension, ``all`` when omitted.

    ``date`` takes a rendered label (``str`` or ``int``). Datetimes go through
    ``buckets.bucket_label`` first; passed here they fail pydantic validation
    with a ``ValidationError``, a caller error outside ``TrackerReaderError``.
    """

    model_config = ConfigDict(frozen=True)

    date: Optional[str] = None
    user: Optional[str] = None
    oid: Optional[str] = None
    env: Optional[str] = None

    @field_validator("date", "user", "oid", "env", mode="before")
    @classmethod
    def _stringify(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def unique(self) -> bool:
        return self.user == TrackerKeys.UNIQUE_USER


class CountSnapshot(BaseModel):
    """A resolved counter value together with the query that produced it."""

    event_id: str
    granularity: Granularity
    date: Optional[str] = None
    user: Optional[str] = None
    oid: Optional[str] = None
    env: str = TrackerKeys.ALL
    unique: bool = False
    value: int
