"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from customiser.engine.session import Snapshot
from customiser.models.requests import OptionModel, StateModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    models_registered: int = 0


class ModelInfo(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    family: str
    type_token: str
    variant_token: str


class ModelsResponse(BaseModel):
    models: list[ModelInfo] = Field(default_factory=list)


class OptionsResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str
    family: str
    colors: list[OptionModel] = Field(default_factory=list)
    rims: list[OptionModel] = Field(default_factory=list)


class SnapshotResponse(BaseModel):
    state: StateModel
    url: str = ""
    front_options: list[OptionModel] = Field(default_factory=list)
    back_options: list[OptionModel] = Field(default_factory=list)
    rim_options: list[OptionModel] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snap: Snapshot) -> SnapshotResponse:
        return cls(
            state=StateModel.from_state(snap.state),
            url=snap.url,
            front_options=[OptionModel.from_option(o) for o in snap.front_options],
            back_options=[OptionModel.from_option(o) for o in snap.back_options],
            rim_options=[OptionModel.from_option(o) for o in snap.rim_options],
        )


class UrlResponse(BaseModel):
    url: str = ""
