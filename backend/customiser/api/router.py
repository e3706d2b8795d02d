"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from customiser.api import configure, health, models

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(models.router)
api_router.include_router(configure.router)
