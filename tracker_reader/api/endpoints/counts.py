from fastapi import APIRouter, Depends, Query
from tracker_reader.api.dependencies import get_counter_service, translate_read_errors
from tracker_reader.domain.models import CountSnapshot, Granularity
from tracker_reader.services.counter_service import CounterService

from shared.constants import TrackerKeys

router = APIRouter(prefix="/counts")


@router.get("/{granularity}", response_model=CountSnapshot)
def get_counts(
    granularity: Granularity,
    event_id: str = Query(TrackerKeys.ALL, description="Event id, 'all' for the app"),
    date: str | None = Query(None, description="Bucket label, ignored for total"),
    user: str | None = Query(None, description="'unique' reads the visitor bitmap"),
    oid: str | None = Query(None),
    env: str | None = Query(None),
    svc: CounterService = Depends(get_counter_service),
):
    with translate_read_errors():
        return svc.count(
            granularity, event_id=event_id, date=date, user=user, oid=oid, env=env
        )
