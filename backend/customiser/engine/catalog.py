"""Option catalog — static colour and rim reference data.

Order is display order; the first option of every list is the default
selection. Labels are the display identity, codes are NOT unique
("Blue" and "Sky Blue" both render as 107).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_RIM_MODEL = "5808"


@dataclass(frozen=True)
class ColorOption:
    label: str
    code: str


# Rims share the colour shape; kept as a distinct name for readability at call sites
RimOption = ColorOption


COLORS: tuple[ColorOption, ...] = (
    ColorOption("Navy Grey", "U16"),
    ColorOption("Bronze", "U12"),
    ColorOption("Blue", "107"),
    ColorOption("Dark Blue", "U13"),
    ColorOption("Light Blue", "20"),
    ColorOption("Sky Blue", "107"),
    ColorOption("Wine", "U14"),
    ColorOption("Orange", "U15"),
    ColorOption("Black", "U9"),
    ColorOption("Light Silver", "05"),
    ColorOption("Grey", "10"),
)

RIMLESS_EXCLUDED_LABELS: frozenset[str] = frozenset(
    {"Light Silver", "Orange", "Wine", "Sky Blue", "Blue"}
)

RIMS: Mapping[str, tuple[RimOption, ...]] = MappingProxyType({
    "5808": (
        RimOption("Green", "K277"),
        RimOption("Blue", "K160"),
        RimOption("Beige", "K223"),
        RimOption("Havana", "K25"),
        RimOption("Black", "K24M"),
    ),
    "5801": (
        RimOption("Green", "K175"),
        RimOption("Black", "K263"),
        RimOption("Havana", "K25"),
        RimOption("Beige", "K223"),
        RimOption("Grey", "K26"),
        RimOption("Tortoise", "K204"),
        RimOption("Deep red", "K258"),
    ),
    "5810": (
        RimOption("Green", "K175"),
        RimOption("Dark Blue", "K259"),
        RimOption("Tortoise", "K204"),
        RimOption("Black", "K24M"),
    ),
    "Eric": (
        RimOption("Green", "K175"),
        RimOption("Dark Blue", "K259"),
        RimOption("Tortoise", "K204"),
        RimOption("Black", "K24M"),
        RimOption("Grey Transp.", "K272"),
    ),
    "Ebbe": (
        RimOption("Green", "K175"),
        RimOption("Havana", "K25"),
        RimOption("Shiny Black", "K199"),
    ),
    "Gunter": (
        RimOption("Green", "K175"),
        RimOption("Black", "K24M"),
        RimOption("Transparent Blue", "K228"),
    ),
    "Lex": (
        RimOption("Brown", "K162M"),
        RimOption("Havana Matte", "K25M"),
        RimOption("Black Matte", "K199M"),
        RimOption("Green", "K175"),
        RimOption("Transparent Blue", "K228"),
    ),
})


@dataclass(frozen=True, eq=False)
class OptionCatalog:
    """Immutable colour/rim tables, injected into the model registry."""

    colors: tuple[ColorOption, ...] = COLORS
    rimless_excluded: frozenset[str] = RIMLESS_EXCLUDED_LABELS
    rims: Mapping[str, tuple[RimOption, ...]] = field(default_factory=lambda: RIMS)
    default_rim_model: str = DEFAULT_RIM_MODEL

    def rims_for(self, model_id: str) -> tuple[RimOption, ...]:
        """Rim set for a model; unknown ids get the default model's set."""
        rims = self.rims.get(model_id)
        if rims is None:
            return self.rims[self.default_rim_model]
        return rims

    def known_models(self) -> list[str]:
        return list(self.rims.keys())


def find_option(
    options: tuple[ColorOption, ...] | list[ColorOption], key: str
) -> ColorOption | None:
    """Look up an option by label, falling back to code. First match wins."""
    for opt in options:
        if opt.label == key:
            return opt
    for opt in options:
        if opt.code == key:
            return opt
    return None


_default_catalog = OptionCatalog()


def get_catalog() -> OptionCatalog:
    return _default_catalog
