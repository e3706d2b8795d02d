"""Tests for per-family model descriptors."""

from __future__ import annotations

import pytest

from customiser.engine.catalog import COLORS
from customiser.engine.descriptor import ModelDescriptor, ModelFamily
from tests.conftest import BLACK, BRONZE, NAVY_GREY, RIM_GREEN_5808, RIMLESS_EXCLUDED


def test_standard_tokens_and_colors():
    d = ModelDescriptor(model_id="5808", family=ModelFamily.STANDARD_FRAME)
    assert d.type_token == "TT"
    assert d.variant_token == "850"
    assert d.allowed_colors() == COLORS


def test_rimless_tokens():
    d = ModelDescriptor(model_id="Eric", family=ModelFamily.RIMLESS_FRAME)
    assert d.type_token == "RIM"
    assert d.variant_token == "RIM_BASIC"


def test_rimless_colors_exclude_by_label():
    d = ModelDescriptor(model_id="Eric", family=ModelFamily.RIMLESS_FRAME)
    labels = [c.label for c in d.allowed_colors()]
    assert len(labels) == len(COLORS) - 5
    assert not RIMLESS_EXCLUDED & set(labels)
    # Order of the remaining entries follows the catalog
    assert labels == ["Navy Grey", "Bronze", "Dark Blue", "Light Blue", "Black", "Grey"]


def test_specific_query_params():
    std = ModelDescriptor(model_id="5801", family=ModelFamily.STANDARD_FRAME)
    rim = ModelDescriptor(model_id="Lex", family=ModelFamily.RIMLESS_FRAME)
    assert std.specific_query_params("U9") == [("FRONT", "U9")]
    assert rim.specific_query_params("U9") == [("LOWERRIM", "U9"), ("UPPERRIM", "U9")]


def test_url_params_order():
    d = ModelDescriptor(model_id="5808", family=ModelFamily.STANDARD_FRAME, conf_id="C1")
    params = d.url_params(NAVY_GREY, BRONZE, RIM_GREEN_5808)
    assert params == [
        ("FRONT", "U16"),
        ("INNERRIM", "K277"),
        ("TEMPLE", "U12"),
        ("CONF", "C1"),
    ]
    assert d.url_params(BLACK, BLACK, RIM_GREEN_5808, conf_id="X")[-1] == ("CONF", "X")


def test_rim_options_follow_model_id():
    d = ModelDescriptor(model_id="Gunter", family=ModelFamily.RIMLESS_FRAME)
    assert [r.label for r in d.rim_options()] == ["Green", "Black", "Transparent Blue"]


@pytest.mark.parametrize("family", [None, "standard_frame", "RIM"])
def test_undifferentiated_descriptor_is_rejected(family):
    with pytest.raises(TypeError):
        ModelDescriptor(model_id="5808", family=family)
