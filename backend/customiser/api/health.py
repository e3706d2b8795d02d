"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from customiser.engine.registry import get_registry
from customiser.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        models_registered=len(get_registry().known_models()),
    )
