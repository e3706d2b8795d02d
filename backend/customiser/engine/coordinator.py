"""Consistency coordinator — pure ``(state, event) -> state`` transitions.

Cross-field rules:
- model change keeps front/back by label when still legal, else resets them
  to the first allowed colour; rim always resets to the model's first rim
- front/back changes mirror into the other side while linked (last writer wins)
- turning the link on copies front into back; turning it off changes nothing
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

from customiser.engine.catalog import ColorOption, find_option
from customiser.engine.registry import ModelRegistry, get_registry
from customiser.engine.state import SelectionState

logger = logging.getLogger(__name__)


class InvalidSelectionError(ValueError):
    """An event named a value outside the currently legal options."""


class EventField(str, enum.Enum):
    MODEL = "model"
    FRONT = "front"
    BACK = "back"
    RIM = "rim"
    PERSPECTIVE = "perspective"
    LINKED = "linked"


@dataclass(frozen=True)
class SelectionEvent:
    field: EventField
    value: str | bool
    # Only read on model changes; comes from the caller's model metadata
    conf_id: str | None = None


def _pick(options: tuple[ColorOption, ...], key: object, what: str) -> ColorOption:
    opt = find_option(options, key) if isinstance(key, str) else None
    if opt is None:
        raise InvalidSelectionError(f"{what} {key!r} is not one of the allowed options")
    return opt


def _keep_or_first(options: tuple[ColorOption, ...], current: ColorOption) -> ColorOption:
    for opt in options:
        if opt.label == current.label:
            return opt
    return options[0]


def change_model(
    state: SelectionState,
    model_id: str,
    conf_id: str = "",
    registry: ModelRegistry | None = None,
) -> SelectionState:
    descriptor = (registry or get_registry()).resolve(model_id, conf_id)
    allowed = descriptor.allowed_colors()

    front = _keep_or_first(allowed, state.front)
    back = front if state.linked else _keep_or_first(allowed, state.back)

    return replace(
        state,
        model_id=model_id,
        conf_id=conf_id,
        front=front,
        back=back,
        rim=descriptor.rim_options()[0],
    )


def apply_event(
    state: SelectionState,
    event: SelectionEvent,
    registry: ModelRegistry | None = None,
) -> SelectionState:
    """Apply one change event. Raises InvalidSelectionError, leaving ``state`` as is."""
    registry = registry or get_registry()
    try:
        field = EventField(event.field)
    except ValueError:
        raise InvalidSelectionError(f"Unknown event field: {event.field!r}") from None

    if field is EventField.MODEL:
        if not isinstance(event.value, str):
            raise InvalidSelectionError(f"model id must be a string, got {event.value!r}")
        return change_model(state, event.value, event.conf_id or "", registry)

    if field is EventField.LINKED:
        if not isinstance(event.value, bool):
            raise InvalidSelectionError(f"link flag must be a boolean, got {event.value!r}")
        if event.value:
            return replace(state, linked=True, back=state.front)
        return replace(state, linked=False)

    if field is EventField.PERSPECTIVE:
        if not isinstance(event.value, str) or not event.value:
            raise InvalidSelectionError("perspective must be a non-empty string")
        return replace(state, perspective=event.value)

    descriptor = registry.resolve(state.model_id, state.conf_id)

    if field is EventField.RIM:
        rim = _pick(descriptor.rim_options(), event.value, "rim")
        return replace(state, rim=rim)

    color = _pick(descriptor.allowed_colors(), event.value, field.value)
    if field is EventField.FRONT:
        if state.linked:
            return replace(state, front=color, back=color)
        return replace(state, front=color)
    if state.linked:
        return replace(state, front=color, back=color)
    return replace(state, back=color)
