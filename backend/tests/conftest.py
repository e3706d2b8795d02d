"""Shared test fixtures."""

from __future__ import annotations

import pytest

from customiser.engine.catalog import ColorOption, RimOption
from customiser.engine.registry import ModelRegistry
from customiser.engine.state import SelectionState


NAVY_GREY = ColorOption("Navy Grey", "U16")
BRONZE = ColorOption("Bronze", "U12")
BLUE = ColorOption("Blue", "107")
SKY_BLUE = ColorOption("Sky Blue", "107")
BLACK = ColorOption("Black", "U9")
GREY = ColorOption("Grey", "10")
ORANGE = ColorOption("Orange", "U15")

RIM_GREEN_5808 = RimOption("Green", "K277")
RIM_HAVANA = RimOption("Havana", "K25")
RIM_BLACK = RimOption("Black", "K24M")
RIM_GREEN = RimOption("Green", "K175")

STANDARD_MODELS = ["5808", "5801", "5810"]
RIMLESS_MODELS = ["Eric", "Ebbe", "Gunter", "Lex"]
RIMLESS_EXCLUDED = {"Light Silver", "Orange", "Wine", "Sky Blue", "Blue"}


@pytest.fixture
def registry() -> ModelRegistry:
    return ModelRegistry()


@pytest.fixture
def standard_state() -> SelectionState:
    """5808 with distinct front/back, unlinked."""
    return SelectionState(
        model_id="5808",
        conf_id="C1",
        front=NAVY_GREY,
        back=BRONZE,
        rim=RIM_GREEN_5808,
        perspective="F",
        linked=False,
    )


@pytest.fixture
def rimless_state() -> SelectionState:
    return SelectionState(
        model_id="Eric",
        conf_id="C2",
        front=BLACK,
        back=GREY,
        rim=RIM_BLACK,
        perspective="F",
        linked=False,
    )
