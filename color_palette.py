#!/usr/bin/env python3
"""
Palette generator: 10-step tonal ramps with WCAG contrast.

The user's color is placed at the step whose target lightness is closest to
its own; every other step is synthesized at that step's target lightness
with the same hue.
"""

import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from color_conversions import hex_list_to_rgb_array, hsl_to_hex, normalize_hex
from color_naming import ColorClassification, classify_hex_color

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

STEP_VALUES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
LIGHTNESS_STEPS = (95, 90, 80, 65, 50, 40, 30, 20, 12, 8)  # Lightest first

# Saturation adjustments are keyed on array index, not step label
LIGHT_STEP_COUNT = 2  # Indices 0-1 are desaturated toward white
DARK_STEP_START = 8  # Indices 8-9 are saturated toward black
LIGHT_DESATURATION = 0.3
DARK_SATURATION_BOOST = 1.2

WHITE = "#FFFFFF"
NEAR_BLACK = "#0A0A0A"

WCAG_AAA_RATIO = 7.0
WCAG_AA_RATIO = 4.5

# sRGB linearization (WCAG 2.x)
SRGB_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


# =============================================================================
# WCAG contrast
# =============================================================================

class WCAGLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    FAIL = "Fail"


def relative_luminance(rgb: np.ndarray) -> np.ndarray:
    """
    Compute WCAG relative luminance for RGB channels.

    Args:
        rgb: Array of shape (3,) or (n, 3) with channels 0-255

    Returns:
        Luminance in [0, 1], one value per color
    """
    c = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(c <= SRGB_THRESHOLD, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear @ LUMINANCE_WEIGHTS


def get_luminance_hex(hex_color: str) -> float:
    """Relative luminance of a hex color."""
    return float(relative_luminance(hex_list_to_rgb_array([hex_color]))[0])


def contrast_ratio(lum1, lum2):
    """Contrast ratio (1-21) between luminances; works element-wise on arrays."""
    bright = np.maximum(lum1, lum2)
    dark = np.minimum(lum1, lum2)
    return (bright + 0.05) / (dark + 0.05)


def get_contrast_ratio(a: str, b: str) -> float:
    """Contrast ratio between two hex colors."""
    return float(contrast_ratio(get_luminance_hex(a), get_luminance_hex(b)))


def wcag_level(ratio: float) -> WCAGLevel:
    """Classify a contrast ratio against the WCAG normal-text thresholds."""
    if ratio >= WCAG_AAA_RATIO:
        return WCAGLevel.AAA
    if ratio >= WCAG_AA_RATIO:
        return WCAGLevel.AA
    return WCAGLevel.FAIL


# =============================================================================
# Types
# =============================================================================

@dataclass(frozen=True)
class ColorStep:
    """One shade of a palette."""
    step: int  # 50..900
    hex: str
    contrast_white: float
    contrast_dark: float
    wcag_white: WCAGLevel
    wcag_dark: WCAGLevel
    is_chosen_color: bool

    @property
    def text_color(self) -> str:
        """White or near-black, whichever reads better on this step."""
        return WHITE if self.contrast_white >= self.contrast_dark else NEAR_BLACK

    def to_dict(self) -> dict:
        return {
            'step': self.step,
            'hex': self.hex,
            'contrastWhite': self.contrast_white,
            'contrastDark': self.contrast_dark,
            'wcagWhite': self.wcag_white.value,
            'wcagDark': self.wcag_dark.value,
            'isChosenColor': self.is_chosen_color,
        }


@dataclass(frozen=True)
class ColorPalette:
    """A named 10-step ramp, lightest (50) to darkest (900)."""
    name: str
    token_name: str
    chosen_step: int  # Step label holding the input color
    steps: tuple
    classification: ColorClassification

    @property
    def chosen(self) -> ColorStep:
        return next(s for s in self.steps if s.is_chosen_color)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'tokenName': self.token_name,
            'chosenStep': self.chosen_step,
            'steps': [s.to_dict() for s in self.steps],
            'classification': self.classification.to_dict(),
        }


# =============================================================================
# Palette generator
# =============================================================================

def closest_step_index(lightness: float) -> int:
    """
    Index of the target lightness nearest to `lightness`.

    Scans left to right and only replaces the best on a strictly smaller
    distance, so ties go to the lighter step.
    """
    closest = 0
    min_diff = abs(lightness - LIGHTNESS_STEPS[0])

    for i in range(1, len(LIGHTNESS_STEPS)):
        diff = abs(lightness - LIGHTNESS_STEPS[i])
        if diff < min_diff:
            min_diff = diff
            closest = i

    return closest


def step_saturation(index: int, saturation: float) -> float:
    """Saturation used for a synthesized step at array position `index`."""
    if index < LIGHT_STEP_COUNT:
        return saturation * LIGHT_DESATURATION
    if index >= DARK_STEP_START:
        return min(saturation * DARK_SATURATION_BOOST, 100)
    return saturation


def generate_color_palette(hex_color: str) -> ColorPalette:
    """
    Generate a 10-step color palette from a hex color.

    Args:
        hex_color: Base color, "#RGB" or "#RRGGBB"

    Returns:
        ColorPalette with shades from light to dark and WCAG contrast
        against white and near-black for each

    Raises:
        InvalidColorFormat: If hex_color is malformed
    """
    classification = classify_hex_color(hex_color)
    base = classification.hsl
    chosen_index = closest_step_index(base.l)

    logger.debug(
        "Base %s (l=%.1f) placed at step %d",
        hex_color, base.l, STEP_VALUES[chosen_index]
    )

    hexes = []
    for i, target_l in enumerate(LIGHTNESS_STEPS):
        if i == chosen_index:
            hexes.append(normalize_hex(hex_color))  # exact user color
        else:
            hexes.append(hsl_to_hex(base.h, step_saturation(i, base.s), target_l))

    luminance = relative_luminance(hex_list_to_rgb_array(hexes))
    vs_white = contrast_ratio(luminance, get_luminance_hex(WHITE))
    vs_dark = contrast_ratio(luminance, get_luminance_hex(NEAR_BLACK))

    steps = tuple(
        ColorStep(
            step=STEP_VALUES[i],
            hex=hexes[i],
            contrast_white=float(vs_white[i]),
            contrast_dark=float(vs_dark[i]),
            wcag_white=wcag_level(vs_white[i]),
            wcag_dark=wcag_level(vs_dark[i]),
            is_chosen_color=i == chosen_index,
        )
        for i in range(len(STEP_VALUES))
    )

    return ColorPalette(
        name=classification.full_name,
        token_name=classification.token_name,
        chosen_step=STEP_VALUES[chosen_index],
        steps=steps,
        classification=classification,
    )
