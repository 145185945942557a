from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from tracker_reader.api.router import api_router
from tracker_reader.core.config import settings
from tracker_reader.core.logger import configure_logging, get_logger
from tracker_reader.infrastructure.redis.reader import CounterReader

from shared.utils.retry import retry

# Configure logging once and get service logger
configure_logging()
logger = get_logger("tracker_reader.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("tracker_reader_starting", extra={"app_id": settings.tracker_app_id})
    app.state.redis = _init_redis_with_retry()
    try:
        app.state.reader = CounterReader(
            app.state.redis,
            settings.tracker_app_id,
            namespace=settings.tracker_namespace,
        )
        yield
    finally:
        logger.info("tracker_reader_stopping")
        app.state.reader = None
        app.state.redis.close()
        app.state.redis = None


app = FastAPI(title="Tracker Counter Reader", version="0.1.0", lifespan=lifespan)
app.include_router(api_router)


def _init_redis_with_retry() -> redis.Redis:
    def _connect():
        r = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=settings.redis_password,
            decode_responses=True,
        )
        r.ping()
        return r

    def _on_retry(attempt: int, exc: BaseException, sleep_for: float):
        logger.warning(
            "redis_connect_retry",
            extra={
                "attempt": attempt,
                "error": str(exc),
                "sleep_for": round(sleep_for, 2),
            },
        )

    r = retry(
        _connect,
        retries=settings.redis_connect_retries,
        base_delay=0.5,
        max_delay=8.0,
        jitter=0.2,
        retry_on=(redis.exceptions.ConnectionError, redis.exceptions.TimeoutError),
        on_retry=_on_retry,
    )
    logger.info("redis_connected")
    return r


@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
