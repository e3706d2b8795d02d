"""Frame customiser configuration-to-URL engine."""

from customiser.engine.catalog import ColorOption, OptionCatalog, RimOption, get_catalog
from customiser.engine.coordinator import (
    EventField,
    InvalidSelectionError,
    SelectionEvent,
    apply_event,
)
from customiser.engine.descriptor import ModelDescriptor, ModelFamily
from customiser.engine.registry import ModelRegistry, get_registry
from customiser.engine.session import ConfiguratorSession, Snapshot
from customiser.engine.state import SelectionState, initial_state
from customiser.engine.url_builder import build_url

__all__ = [
    "ColorOption",
    "RimOption",
    "OptionCatalog",
    "get_catalog",
    "EventField",
    "InvalidSelectionError",
    "SelectionEvent",
    "apply_event",
    "ModelDescriptor",
    "ModelFamily",
    "ModelRegistry",
    "get_registry",
    "ConfiguratorSession",
    "Snapshot",
    "SelectionState",
    "initial_state",
    "build_url",
]
