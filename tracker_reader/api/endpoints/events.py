from fastapi import APIRouter, Depends
from tracker_reader.api.dependencies import get_counter_service, translate_read_errors
from tracker_reader.services.counter_service import CounterService

router = APIRouter(prefix="/events")


@router.get("")
def list_events(svc: CounterService = Depends(get_counter_service)):
    with translate_read_errors():
        return {"events": svc.list_events()}


@router.get("/{event_id}/objects")
def event_objects(event_id: str, svc: CounterService = Depends(get_counter_service)):
    with translate_read_errors():
        return {"event_id": event_id, "objects": svc.event_objects(event_id)}


@router.get("/{event_id}/envs")
def event_envs(event_id: str, svc: CounterService = Depends(get_counter_service)):
    with translate_read_errors():
        return {"event_id": event_id, "envs": svc.event_envs(event_id)}
