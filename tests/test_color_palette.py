"""Tests for WCAG contrast and palette synthesis."""

import json

import numpy as np
import pytest

from color_conversions import InvalidColorFormat, hsl_to_hex, normalize_hex
from color_naming import classify_hex_color
from color_palette import (
    LIGHT_STEP_COUNT,
    LIGHTNESS_STEPS,
    NEAR_BLACK,
    STEP_VALUES,
    WHITE,
    WCAGLevel,
    closest_step_index,
    generate_color_palette,
    get_contrast_ratio,
    get_luminance_hex,
    relative_luminance,
    step_saturation,
    wcag_level,
)

SAMPLE_COLORS = ["#000000", "#FFFFFF", "#3B82F6", "#f53", "#FF5733", "#808080", "#10B981", "#7C3AED"]


# =============================================================================
# WCAG contrast
# =============================================================================

def test_black_on_white_is_maximum_contrast():
    assert get_contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21)


def test_contrast_is_symmetric_and_at_least_one():
    assert get_contrast_ratio("#3B82F6", "#FFFFFF") == pytest.approx(get_contrast_ratio("#FFFFFF", "#3B82F6"))
    assert get_contrast_ratio("#3B82F6", "#3B82F6") == pytest.approx(1)


def test_luminance_extremes():
    assert get_luminance_hex("#000000") == pytest.approx(0)
    assert get_luminance_hex("#FFFFFF") == pytest.approx(1)
    # Below the linear threshold: 10/255 / 12.92
    assert get_luminance_hex(NEAR_BLACK) == pytest.approx((10 / 255) / 12.92)


def test_relative_luminance_is_vectorized():
    lum = relative_luminance(np.array([[0, 0, 0], [255, 255, 255], [255, 0, 0]]))
    assert lum.shape == (3,)
    assert lum[2] == pytest.approx(0.2126)


@pytest.mark.parametrize("ratio, level", [
    (21, WCAGLevel.AAA),
    (7.0, WCAGLevel.AAA),
    (6.99, WCAGLevel.AA),
    (4.5, WCAGLevel.AA),
    (4.49, WCAGLevel.FAIL),
    (1, WCAGLevel.FAIL),
])
def test_wcag_level(ratio, level):
    assert wcag_level(ratio) == level


def test_wcag_level_values():
    assert WCAGLevel.FAIL == "Fail"
    assert WCAGLevel.AAA.value == "AAA"


# =============================================================================
# Step selection
# =============================================================================

@pytest.mark.parametrize("lightness, index", [
    (100, 0),
    (95, 0),
    (92.5, 0),   # tie between 95 and 90 goes to the lighter step
    (91, 1),
    (57.5, 3),   # tie between 65 and 50
    (50, 4),
    (10, 8),     # tie between 12 and 8
    (9.9, 9),
    (0, 9),
])
def test_closest_step_index(lightness, index):
    assert closest_step_index(lightness) == index


def test_step_saturation_by_index():
    assert step_saturation(0, 50) == pytest.approx(15)
    assert step_saturation(1, 50) == pytest.approx(15)
    assert step_saturation(2, 50) == 50
    assert step_saturation(7, 50) == 50
    assert step_saturation(8, 50) == pytest.approx(60)
    assert step_saturation(9, 90) == 100


def test_tables_are_parallel():
    assert len(STEP_VALUES) == len(LIGHTNESS_STEPS) == 10
    assert list(LIGHTNESS_STEPS) == sorted(LIGHTNESS_STEPS, reverse=True)


# =============================================================================
# Palette
# =============================================================================

@pytest.mark.parametrize("hex_color", SAMPLE_COLORS)
def test_palette_shape(hex_color):
    palette = generate_color_palette(hex_color)

    assert len(palette.steps) == 10
    assert [s.step for s in palette.steps] == list(STEP_VALUES)

    chosen = [s for s in palette.steps if s.is_chosen_color]
    assert len(chosen) == 1
    assert chosen[0].hex == normalize_hex(hex_color)
    assert chosen[0].step == palette.chosen_step
    assert palette.chosen is chosen[0]


@pytest.mark.parametrize("hex_color", SAMPLE_COLORS)
def test_palette_contrast_values(hex_color):
    palette = generate_color_palette(hex_color)
    for step in palette.steps:
        assert 1 <= step.contrast_white <= 21 + 1e-9
        assert 1 <= step.contrast_dark <= 21 + 1e-9
        assert step.wcag_white == wcag_level(step.contrast_white)
        assert step.wcag_dark == wcag_level(step.contrast_dark)
        assert step.contrast_white == pytest.approx(get_contrast_ratio(step.hex, WHITE))
        assert step.contrast_dark == pytest.approx(get_contrast_ratio(step.hex, NEAR_BLACK))


def _assert_monotonic(steps):
    white = [s.contrast_white for s in steps]
    dark = [s.contrast_dark for s in steps]
    assert all(a <= b for a, b in zip(white, white[1:]))
    assert all(a >= b for a, b in zip(dark, dark[1:]))


@pytest.mark.parametrize("hue", range(0, 360, 15))
@pytest.mark.parametrize("saturation", [0, 20, 60, 100])
def test_contrast_is_monotonic_within_saturation_groups(hue, saturation):
    # The desaturated light steps and the rest each darken in order; the
    # exact input color replaces its step and is left out
    palette = generate_color_palette(hsl_to_hex(hue, saturation, 50))
    light = [s for s in palette.steps[:LIGHT_STEP_COUNT] if not s.is_chosen_color]
    rest = [s for s in palette.steps[LIGHT_STEP_COUNT:] if not s.is_chosen_color]
    _assert_monotonic(light)
    _assert_monotonic(rest)


@pytest.mark.parametrize("hex_color", ["#000000", "#3B82F6", "#808080", "#FF5733"])
def test_contrast_is_monotonic_across_whole_palette(hex_color):
    _assert_monotonic(generate_color_palette(hex_color).steps)


@pytest.mark.parametrize("hex_color", ["#00FFFF", "#FFFF00"])
def test_desaturated_light_steps_can_break_monotonicity(hex_color):
    steps = generate_color_palette(hex_color).steps
    assert steps[1].contrast_white > steps[2].contrast_white


def test_black_palette():
    palette = generate_color_palette("#000000")
    assert palette.chosen_step == 900
    assert palette.steps[9].hex == "#000000"
    assert palette.steps[0].hex == "#F2F2F2"
    assert palette.steps[1].hex == "#E6E6E6"
    assert palette.steps[9].wcag_white == WCAGLevel.AAA
    assert palette.steps[9].wcag_dark == WCAGLevel.FAIL
    assert palette.steps[0].text_color == NEAR_BLACK
    assert palette.steps[9].text_color == WHITE
    assert palette.name == "Charcoal Neutral"


def test_blue_palette():
    palette = generate_color_palette("#3B82F6")
    classification = classify_hex_color("#3B82F6")
    assert palette.chosen_step == 300
    assert palette.steps[3].hex == "#3B82F6"
    assert palette.classification == classification
    assert palette.name == classification.full_name
    assert palette.token_name == classification.token_name


def test_shorthand_input_is_normalized():
    palette = generate_color_palette("#f53")
    assert palette.chosen.hex == "#FF5533"
    assert palette.chosen_step == 300


def test_synthesized_steps_keep_hue():
    palette = generate_color_palette("#3B82F6")
    for step in palette.steps[2:8]:
        if not step.is_chosen_color:
            assert classify_hex_color(step.hex).hsl.h == pytest.approx(217.2, abs=2)


def test_palette_rejects_malformed():
    with pytest.raises(InvalidColorFormat):
        generate_color_palette("notacolor")


def test_palette_to_dict_is_json_ready():
    data = generate_color_palette("#3B82F6").to_dict()
    encoded = json.loads(json.dumps(data))
    assert encoded['chosenStep'] == 300
    assert len(encoded['steps']) == 10
    assert encoded['steps'][3]['isChosenColor'] is True
    assert encoded['steps'][3]['wcagWhite'] in ("AAA", "AA", "Fail")
    assert set(encoded['steps'][0]) == {
        'step', 'hex', 'contrastWhite', 'contrastDark', 'wcagWhite', 'wcagDark', 'isChosenColor'
    }
    assert encoded['classification']['hueGroup'] == "Blue"
