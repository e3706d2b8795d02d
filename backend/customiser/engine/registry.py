"""Model registry — classifies a model id into its family and builds descriptors.

Usage:
    registry = get_registry()
    descriptor = registry.resolve("Eric", conf_id="C2")
    descriptor.type_token  # "RIM"

Resolution is total: unknown ids fall back to the standard family, whose rim
lookup in turn falls back to the 5808 table.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from customiser.engine.catalog import OptionCatalog, get_catalog
from customiser.engine.descriptor import ModelDescriptor, ModelFamily

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = ModelFamily.STANDARD_FRAME

MODEL_FAMILIES: Mapping[str, ModelFamily] = MappingProxyType({
    "5808": ModelFamily.STANDARD_FRAME,
    "5801": ModelFamily.STANDARD_FRAME,
    "5810": ModelFamily.STANDARD_FRAME,
    "Eric": ModelFamily.RIMLESS_FRAME,
    "Ebbe": ModelFamily.RIMLESS_FRAME,
    "Gunter": ModelFamily.RIMLESS_FRAME,
    "Lex": ModelFamily.RIMLESS_FRAME,
})


class ModelRegistry:
    """Resolves model ids against an injected option catalog."""

    def __init__(
        self,
        catalog: OptionCatalog | None = None,
        families: Mapping[str, ModelFamily] | None = None,
    ) -> None:
        self.catalog = catalog or get_catalog()
        self._families = families if families is not None else MODEL_FAMILIES

    def family_of(self, model_id: str) -> ModelFamily:
        family = self._families.get(model_id)
        if family is None:
            logger.debug("Unknown model %r, using %s", model_id, DEFAULT_FAMILY.name)
            return DEFAULT_FAMILY
        return family

    def resolve(self, model_id: str, conf_id: str = "") -> ModelDescriptor:
        return ModelDescriptor(
            model_id=model_id,
            family=self.family_of(model_id),
            conf_id=conf_id,
            catalog=self.catalog,
        )

    def known_models(self) -> list[str]:
        return list(self._families.keys())


# Module-level singleton
_registry = ModelRegistry()


def get_registry() -> ModelRegistry:
    return _registry
