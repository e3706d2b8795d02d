"""Tests for the option catalog."""

from customiser.engine.catalog import COLORS, RIMS, OptionCatalog, find_option, get_catalog


def test_color_order_and_default():
    assert COLORS[0].label == "Navy Grey"
    assert len(COLORS) == 11


def test_shared_codes_are_kept():
    blues = [c for c in COLORS if c.code == "107"]
    assert [c.label for c in blues] == ["Blue", "Sky Blue"]


def test_rims_for_known_model():
    cat = get_catalog()
    assert [r.code for r in cat.rims_for("Ebbe")] == ["K175", "K25", "K199"]


def test_rims_for_unknown_model_falls_back_to_5808():
    cat = get_catalog()
    assert cat.rims_for("Nope") == RIMS["5808"]
    assert cat.rims_for("") == RIMS["5808"]


def test_custom_default_rim_model():
    cat = OptionCatalog(default_rim_model="Lex")
    assert cat.rims_for("Nope")[0].code == "K162M"


def test_known_models():
    assert get_catalog().known_models() == ["5808", "5801", "5810", "Eric", "Ebbe", "Gunter", "Lex"]


def test_find_option_label_before_code():
    assert find_option(COLORS, "Sky Blue").label == "Sky Blue"
    # Code lookup returns the first entry carrying it
    assert find_option(COLORS, "107").label == "Blue"
    assert find_option(COLORS, "Purple") is None
