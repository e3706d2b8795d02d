"""POST /api/configure/* — seed, transition and render selection states.

The service keeps no session: every request carries the caller's current
state, and the response carries the next one.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from customiser.config import Settings
from customiser.dependencies import get_model_registry, get_settings
from customiser.engine.coordinator import InvalidSelectionError
from customiser.engine.registry import ModelRegistry
from customiser.engine.session import ConfiguratorSession, project
from customiser.engine.state import SelectionState
from customiser.models.requests import EventRequest, InitRequest, StateModel, UrlRequest
from customiser.models.responses import SnapshotResponse, UrlResponse

router = APIRouter(prefix="/configure")
logger = logging.getLogger(__name__)


def _checked_state(model: StateModel, registry: ModelRegistry) -> SelectionState:
    """Convert an incoming state, rejecting one that breaks the selection invariants."""
    state = model.to_state()
    issues = state.violations(registry)
    if issues:
        logger.warning("Inconsistent state for %s: %s", state.model_id, "; ".join(issues))
        raise HTTPException(status_code=422, detail=issues)
    return state


@router.post("/init", response_model=SnapshotResponse)
async def init(
    req: InitRequest,
    settings: Settings = Depends(get_settings),
    registry: ModelRegistry = Depends(get_model_registry),
) -> SnapshotResponse:
    session = ConfiguratorSession.start(
        req.model_id,
        conf_id=req.conf_id,
        perspective=req.perspective or settings.default_perspective,
        linked=req.linked,
        registry=registry,
        base_template=settings.image_base_template,
    )
    return SnapshotResponse.from_snapshot(session.snapshot())


@router.post("/event", response_model=SnapshotResponse)
async def event(
    req: EventRequest,
    settings: Settings = Depends(get_settings),
    registry: ModelRegistry = Depends(get_model_registry),
) -> SnapshotResponse:
    state = _checked_state(req.state, registry)
    session = ConfiguratorSession(state, registry, settings.image_base_template)
    try:
        snap = session.dispatch(req.event.to_event())
    except InvalidSelectionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return SnapshotResponse.from_snapshot(snap)


@router.post("/url", response_model=UrlResponse)
async def url(
    req: UrlRequest,
    settings: Settings = Depends(get_settings),
    registry: ModelRegistry = Depends(get_model_registry),
) -> UrlResponse:
    state = _checked_state(req.state, registry)
    snap = project(state, registry, settings.image_base_template)
    return UrlResponse(url=snap.url)
