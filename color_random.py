#!/usr/bin/env python3
"""
Pleasant random colors for seeding themes or test palettes.

Saturation and lightness are kept in moderate ranges so samples are neither
garish nor washed out.
"""

from typing import Optional

import numpy as np

from color_conversions import rgb_to_hex


# =============================================================================
# Constants
# =============================================================================

SATURATION_RANGE = (30, 70)  # percent
LIGHTNESS_RANGE = (50, 80)  # percent


def generate_random_color(rng: Optional[np.random.Generator] = None) -> str:
    """Sample a random hex color with moderate saturation and lightness."""
    if rng is None:
        rng = np.random.default_rng()

    hue = rng.uniform(0, 360) / 360
    sat = rng.uniform(*SATURATION_RANGE) / 100
    light = rng.uniform(*LIGHTNESS_RANGE) / 100

    # Chroma / second-largest component / match value
    c = (1 - abs(2 * light - 1)) * sat
    x = c * (1 - abs((hue * 6) % 2 - 1))
    m = light - c / 2

    if hue < 1 / 6:
        r, g, b = c, x, 0
    elif hue < 2 / 6:
        r, g, b = x, c, 0
    elif hue < 3 / 6:
        r, g, b = 0, c, x
    elif hue < 4 / 6:
        r, g, b = 0, x, c
    elif hue < 5 / 6:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return rgb_to_hex((r + m) * 255, (g + m) * 255, (b + m) * 255)


def generate_random_colors(count: int, seed: Optional[int] = None) -> list[str]:
    """Sample `count` colors; the same seed always yields the same list."""
    rng = np.random.default_rng(seed)
    return [generate_random_color(rng) for _ in range(count)]
