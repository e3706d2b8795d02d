"""Tests for the model registry."""

import pytest

from customiser.engine.catalog import RIMS, OptionCatalog, RimOption
from customiser.engine.descriptor import ModelFamily
from customiser.engine.registry import ModelRegistry, get_registry
from tests.conftest import RIMLESS_MODELS, STANDARD_MODELS


@pytest.mark.parametrize("model_id", STANDARD_MODELS)
def test_standard_models(registry, model_id):
    d = registry.resolve(model_id)
    assert d.family is ModelFamily.STANDARD_FRAME
    assert d.rim_options() == RIMS[model_id]


@pytest.mark.parametrize("model_id", RIMLESS_MODELS)
def test_rimless_models(registry, model_id):
    d = registry.resolve(model_id)
    assert d.family is ModelFamily.RIMLESS_FRAME
    assert d.type_token == "RIM"


@pytest.mark.parametrize("model_id", ["", "5809", "eric", "Unknown Frame"])
def test_unknown_models_fall_back(registry, model_id):
    d = registry.resolve(model_id)
    assert d.family is ModelFamily.STANDARD_FRAME
    assert d.rim_options() == RIMS["5808"]


def test_resolve_carries_conf_id(registry):
    assert registry.resolve("Eric", conf_id="C2").conf_id == "C2"
    assert registry.resolve("Eric").conf_id == ""


def test_injected_catalog():
    cat = OptionCatalog(rims={"5808": (RimOption("Only", "K1"),)})
    reg = ModelRegistry(catalog=cat)
    assert reg.resolve("Lex").rim_options() == (RimOption("Only", "K1"),)


def test_known_models_and_singleton():
    assert get_registry() is get_registry()
    assert get_registry().known_models() == STANDARD_MODELS + RIMLESS_MODELS
