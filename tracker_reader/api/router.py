from fastapi import APIRouter

from .endpoints import counts, events, health

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(events.router)
api_router.include_router(counts.router)
