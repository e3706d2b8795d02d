"""GET /api/models — selectable models and their legal options."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from customiser.dependencies import get_model_registry
from customiser.engine.registry import ModelRegistry
from customiser.models.requests import OptionModel
from customiser.models.responses import ModelInfo, ModelsResponse, OptionsResponse

router = APIRouter(prefix="/models")


@router.get("", response_model=ModelsResponse)
async def list_models(registry: ModelRegistry = Depends(get_model_registry)) -> ModelsResponse:
    infos = []
    for model_id in registry.known_models():
        d = registry.resolve(model_id)
        infos.append(
            ModelInfo(
                model_id=model_id,
                family=d.family.value,
                type_token=d.type_token,
                variant_token=d.variant_token,
            )
        )
    return ModelsResponse(models=infos)


@router.get("/{model_id}/options", response_model=OptionsResponse)
async def model_options(
    model_id: str, registry: ModelRegistry = Depends(get_model_registry)
) -> OptionsResponse:
    # Unknown ids answer with the standard family / 5808 rim fallback
    d = registry.resolve(model_id)
    return OptionsResponse(
        model_id=model_id,
        family=d.family.value,
        colors=[OptionModel.from_option(o) for o in d.allowed_colors()],
        rims=[OptionModel.from_option(o) for o in d.rim_options()],
    )
