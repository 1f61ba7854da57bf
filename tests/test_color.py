from __future__ import annotations

import pytest

from duskmode.features.color import (
    contrast_ratio,
    from_hsl,
    hue_temperature,
    mix,
    normalize_color,
    parse_color,
    relative_luminance,
    to_hsl,
)


def test_normalize_color_accepts_hex_rgb_and_hsl_literals() -> None:
    assert normalize_color("#FFF") == "#ffffff"
    assert normalize_color("#8B5CF6") == "#8b5cf6"
    assert normalize_color("rgb(255, 0, 0)") == "#ff0000"
    assert normalize_color("hsl(120, 100%, 50%)") == "#00ff00"


@pytest.mark.parametrize("literal", ["", "not-a-colour", "#12", "rgb(1, 2)"])
def test_parse_color_rejects_invalid_literals(literal: str) -> None:
    with pytest.raises(ValueError):
        parse_color(literal)


def test_contrast_ratio_spans_wcag_range() -> None:
    assert contrast_ratio("#ffffff", "#000000") == pytest.approx(21.0)
    assert contrast_ratio("#777777", "#777777") == pytest.approx(1.0)
    assert contrast_ratio("#000000", "#ffffff") == contrast_ratio("#ffffff", "#000000")


def test_relative_luminance_bounds() -> None:
    assert relative_luminance("#000000") == pytest.approx(0.0)
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_to_hsl_and_back() -> None:
    hue, saturation, lightness = to_hsl("#ff0000")
    assert hue == pytest.approx(0.0)
    assert saturation == pytest.approx(1.0)
    assert lightness == pytest.approx(0.5)
    assert from_hsl(hue, saturation, lightness) == "#ff0000"


def test_hue_temperature_buckets() -> None:
    assert hue_temperature(30.0) == "warm"
    assert hue_temperature(330.0) == "warm"
    assert hue_temperature(200.0) == "cool"
    assert hue_temperature(90.0) == "neutral"
    assert hue_temperature(270.0) == "neutral"


def test_mix_endpoints_and_clamping() -> None:
    assert mix("#000000", "#ffffff", 0.0) == "#000000"
    assert mix("#000000", "#ffffff", 1.0) == "#ffffff"
    assert mix("#000000", "#ffffff", 5.0) == "#ffffff"
    middle = mix("#000000", "#ffffff", 0.5)
    assert middle not in ("#000000", "#ffffff")
