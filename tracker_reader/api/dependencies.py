from contextlib import contextmanager

from fastapi import Depends, HTTPException, Request
from tracker_reader.domain.errors import ParseError, StoreError
from tracker_reader.infrastructure.redis.reader import CounterReader
from tracker_reader.services.counter_service import CounterService


def get_reader(request: Request) -> CounterReader:
    reader = getattr(request.app.state, "reader", None)
    if reader is None:
        raise HTTPException(status_code=503, detail="Counter reader not initialised")
    return reader


def get_counter_service(reader: CounterReader = Depends(get_reader)) -> CounterService:
    return CounterService(reader)


@contextmanager
def translate_read_errors():
    """Map reader failures onto HTTP status codes."""
    try:
        yield
    except ParseError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=503, detail=f"Store unavailable: {e}")
