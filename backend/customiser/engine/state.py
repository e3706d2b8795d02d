"""SelectionState — the current customisation choice as an immutable value.

Transitions never mutate a state; the coordinator returns a new one via
``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass

from customiser.engine.catalog import ColorOption, RimOption
from customiser.engine.registry import ModelRegistry, get_registry


@dataclass(frozen=True)
class SelectionState:
    model_id: str
    conf_id: str
    front: ColorOption
    back: ColorOption
    rim: RimOption
    perspective: str
    linked: bool = False

    def violations(self, registry: ModelRegistry | None = None) -> list[str]:
        """List broken invariants; empty when the state is consistent."""
        descriptor = (registry or get_registry()).resolve(self.model_id, self.conf_id)
        allowed = descriptor.allowed_colors()
        issues: list[str] = []
        if self.front not in allowed:
            issues.append(f"front {self.front.label!r} not allowed for {self.model_id}")
        if self.back not in allowed:
            issues.append(f"back {self.back.label!r} not allowed for {self.model_id}")
        if self.rim not in descriptor.rim_options():
            issues.append(f"rim {self.rim.label!r} not in rim set for {self.model_id}")
        if self.linked and self.front != self.back:
            issues.append("linked but front and back differ")
        if not self.perspective:
            issues.append("perspective is empty")
        return issues

    @property
    def is_consistent(self) -> bool:
        return not self.violations()


def initial_state(
    model_id: str,
    conf_id: str = "",
    perspective: str = "F",
    linked: bool = False,
    registry: ModelRegistry | None = None,
) -> SelectionState:
    """Seed a state from the first option of every list for ``model_id``."""
    descriptor = (registry or get_registry()).resolve(model_id, conf_id)
    colors = descriptor.allowed_colors()
    return SelectionState(
        model_id=model_id,
        conf_id=conf_id,
        front=colors[0],
        back=colors[0],
        rim=descriptor.rim_options()[0],
        perspective=perspective,
        linked=linked,
    )
