"""Model descriptors — per-family URL tokens, query layout and legal colours.

Families form a closed set. Each capability is an exhaustive match over
``ModelFamily``, so adding a family means extending every match here and the
classification table in ``registry``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from customiser.engine.catalog import ColorOption, OptionCatalog, RimOption, get_catalog


class ModelFamily(str, enum.Enum):
    STANDARD_FRAME = "standard_frame"
    RIMLESS_FRAME = "rimless_frame"


@dataclass(frozen=True)
class ModelDescriptor:
    """Rules for one model id, resolved through the registry."""

    model_id: str
    family: ModelFamily
    conf_id: str = ""
    catalog: OptionCatalog = field(default_factory=get_catalog, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.family, ModelFamily):
            raise TypeError(
                f"ModelDescriptor needs a concrete ModelFamily, got {self.family!r}"
            )

    @property
    def type_token(self) -> str:
        if self.family is ModelFamily.STANDARD_FRAME:
            return "TT"
        if self.family is ModelFamily.RIMLESS_FRAME:
            return "RIM"
        raise AssertionError(self.family)

    @property
    def variant_token(self) -> str:
        if self.family is ModelFamily.STANDARD_FRAME:
            return "850"
        if self.family is ModelFamily.RIMLESS_FRAME:
            return "RIM_BASIC"
        raise AssertionError(self.family)

    def allowed_colors(self) -> tuple[ColorOption, ...]:
        colors = self.catalog.colors
        if self.family is ModelFamily.STANDARD_FRAME:
            return colors
        if self.family is ModelFamily.RIMLESS_FRAME:
            # Filtered by label: both "107" entries go, "Blue" and "Sky Blue"
            return tuple(c for c in colors if c.label not in self.catalog.rimless_excluded)
        raise AssertionError(self.family)

    def rim_options(self) -> tuple[RimOption, ...]:
        return self.catalog.rims_for(self.model_id)

    def specific_query_params(self, front_code: str) -> list[tuple[str, str]]:
        if self.family is ModelFamily.STANDARD_FRAME:
            return [("FRONT", front_code)]
        if self.family is ModelFamily.RIMLESS_FRAME:
            return [("LOWERRIM", front_code), ("UPPERRIM", front_code)]
        raise AssertionError(self.family)

    def url_params(
        self,
        front: ColorOption,
        back: ColorOption,
        rim: RimOption,
        conf_id: str | None = None,
    ) -> list[tuple[str, str]]:
        """Family params followed by the common INNERRIM/TEMPLE/CONF triple."""
        return self.specific_query_params(front.code) + [
            ("INNERRIM", rim.code),
            ("TEMPLE", back.code),
            ("CONF", self.conf_id if conf_id is None else conf_id),
        ]
