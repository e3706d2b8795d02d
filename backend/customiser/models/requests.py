"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from customiser.engine.catalog import ColorOption
from customiser.engine.coordinator import EventField, SelectionEvent
from customiser.engine.state import SelectionState


class OptionModel(BaseModel):
    label: str
    code: str

    @classmethod
    def from_option(cls, opt: ColorOption) -> OptionModel:
        return cls(label=opt.label, code=opt.code)

    def to_option(self) -> ColorOption:
        return ColorOption(self.label, self.code)


class StateModel(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str = Field(..., description="Frame model identifier, e.g. 5808 or Eric")
    conf_id: str = Field(default="", description="Opaque configuration tag for the model")
    front: OptionModel
    back: OptionModel
    rim: OptionModel
    perspective: str = Field(default="F", description="Camera perspective code")
    linked: bool = Field(default=False, description="Keep front and back colours equal")

    @classmethod
    def from_state(cls, state: SelectionState) -> StateModel:
        return cls(
            model_id=state.model_id,
            conf_id=state.conf_id,
            front=OptionModel.from_option(state.front),
            back=OptionModel.from_option(state.back),
            rim=OptionModel.from_option(state.rim),
            perspective=state.perspective,
            linked=state.linked,
        )

    def to_state(self) -> SelectionState:
        return SelectionState(
            model_id=self.model_id,
            conf_id=self.conf_id,
            front=self.front.to_option(),
            back=self.back.to_option(),
            rim=self.rim.to_option(),
            perspective=self.perspective,
            linked=self.linked,
        )


class EventModel(BaseModel):
    field: EventField = Field(..., description="Which selection changed")
    value: bool | str = Field(..., description="New value: option label/code, model id or link flag")
    conf_id: str | None = Field(default=None, description="Conf tag of the new model (model events only)")

    def to_event(self) -> SelectionEvent:
        return SelectionEvent(field=self.field, value=self.value, conf_id=self.conf_id)


class InitRequest(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_id: str = Field(..., description="Frame model identifier")
    conf_id: str = Field(default="", description="Opaque configuration tag for the model")
    perspective: str | None = Field(default=None, description="Defaults to the configured perspective")
    linked: bool = False


class EventRequest(BaseModel):
    state: StateModel
    event: EventModel


class UrlRequest(BaseModel):
    state: StateModel
