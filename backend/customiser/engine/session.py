"""Configurator session — one actor applying events and re-projecting the URL."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from customiser.engine.catalog import ColorOption, RimOption
from customiser.engine.coordinator import InvalidSelectionError, SelectionEvent, apply_event
from customiser.engine.registry import ModelRegistry, get_registry
from customiser.engine.state import SelectionState, initial_state
from customiser.engine.url_builder import DEFAULT_BASE_TEMPLATE, build_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs after a transition."""

    state: SelectionState
    url: str
    front_options: tuple[ColorOption, ...]
    back_options: tuple[ColorOption, ...]
    rim_options: tuple[RimOption, ...]


def project(
    state: SelectionState,
    registry: ModelRegistry | None = None,
    base_template: str | None = DEFAULT_BASE_TEMPLATE,
) -> Snapshot:
    descriptor = (registry or get_registry()).resolve(state.model_id, state.conf_id)
    colors = descriptor.allowed_colors()
    return Snapshot(
        state=state,
        url=build_url(state, descriptor, base_template),
        front_options=colors,
        back_options=colors,
        rim_options=descriptor.rim_options(),
    )


class ConfiguratorSession:
    """Holds the current selection; events are processed one at a time."""

    def __init__(
        self,
        state: SelectionState,
        registry: ModelRegistry | None = None,
        base_template: str | None = DEFAULT_BASE_TEMPLATE,
    ) -> None:
        self.registry = registry or get_registry()
        self.base_template = base_template
        self.state = state

    @classmethod
    def start(
        cls,
        model_id: str,
        conf_id: str = "",
        perspective: str = "F",
        linked: bool = False,
        registry: ModelRegistry | None = None,
        base_template: str | None = DEFAULT_BASE_TEMPLATE,
    ) -> ConfiguratorSession:
        registry = registry or get_registry()
        state = initial_state(model_id, conf_id, perspective, linked, registry)
        logger.debug("Session started for model %s (conf=%s)", model_id, conf_id)
        return cls(state, registry, base_template)

    def dispatch(self, event: SelectionEvent) -> Snapshot:
        """Apply ``event`` and return the new snapshot.

        A rejected event re-raises and leaves ``self.state`` unchanged.
        """
        t0 = time.perf_counter()
        try:
            new_state = apply_event(self.state, event, self.registry)
        except InvalidSelectionError as e:
            logger.warning("Rejected %s event: %s", event.field, e)
            raise

        self.state = new_state
        snap = self.snapshot()
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s -> %s in %.2fms", event.field, snap.url or "<empty>", elapsed)
        return snap

    def snapshot(self) -> Snapshot:
        return project(self.state, self.registry, self.base_template)

    @property
    def url(self) -> str:
        return self.snapshot().url
