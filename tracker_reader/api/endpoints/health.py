from fastapi import APIRouter, Request, Response

router = APIRouter()


@router.get("/healthz")
def healthz(request: Request):
    try:
        pong = request.app.state.redis.ping()
        return {"status": "ok", "redis": pong}
    except Exception as e:
        return Response(status_code=503, content=str(e))


@router.get("/readyz")
def readyz(request: Request):
    if getattr(request.app.state, "reader", None) is not None:
        return {"status": "ready", "app_id": request.app.state.reader.app_id}
    return Response(status_code=503, content="not ready")
