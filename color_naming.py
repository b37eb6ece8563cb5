#!/usr/bin/env python3
"""
Deterministic color naming.

Maps a color to names like "Smokey Azure" or "Bright Mint" from its HSL
coordinates: a hue family chosen by angular band and a tone adjective chosen
by saturation/lightness bucket.
"""

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

from color_conversions import HSL, hex_to_rgb, rgb_to_hsl


# =============================================================================
# Constants
# =============================================================================

NEUTRAL_SATURATION_THRESHOLD = 8  # Below this, hue is perceptually unreliable
NEUTRAL = "Neutral"


class HueBand(NamedTuple):
    """Half-open hue interval [start, end) and the names it is split into."""
    start: float
    end: float
    names: tuple


HUE_BANDS = (
    HueBand(0, 15, ("Scarlet", "Red", "Crimson")),
    HueBand(15, 35, ("Tangerine", "Orange")),
    HueBand(35, 50, ("Amber", "Honey")),
    HueBand(50, 70, ("Lemon", "Yellow", "Gold")),
    HueBand(70, 85, ("Lime", "Chartreuse")),
    HueBand(85, 155, ("Mint", "Green", "Emerald")),
    HueBand(155, 180, ("Teal", "Aqua")),
    HueBand(180, 200, ("Cyan", "Sky")),
    HueBand(200, 240, ("Azure", "Blue", "Cobalt")),
    HueBand(240, 270, ("Indigo",)),
    HueBand(270, 295, ("Violet", "Lavender")),
    HueBand(295, 320, ("Purple", "Grape")),
    HueBand(320, 335, ("Magenta", "Fuchsia")),
    HueBand(335, 350, ("Rose", "Cerise", "Rosewood")),
    HueBand(350, 360, ("Scarlet", "Red", "Crimson")),  # wraps back to red
)

HUE_VOCABULARY = frozenset({NEUTRAL}) | frozenset(
    name for band in HUE_BANDS for name in band.names
)

TONE_BUCKETS = {
    'veryLight': ("Pale", "Washed", "Faint"),
    'lightSoft': ("Soft", "Subdued"),
    'light': ("Light", "Gentle"),
    'bright': ("Bright", "Lively"),
    'muted': ("Muted", "Hazy", "Smokey"),
    'medium': ("Medium", "Balanced"),
    'vivid': ("Vivid", "Strong"),
    'dim': ("Dim", "Muddy", "Dirty"),
    'dark': ("Dark",),
    'rich': ("Rich", "Intense"),
    'charcoal': ("Charcoal", "Dusky"),
    'deep': ("Deep",),
    'inky': ("Inky",),
}

# Lightness floor (exclusive) -> bucket per saturation tier.
# Each tier is (saturation ceiling, bucket); the last tier has no ceiling.
TONE_BANDS = (
    (85, (None, 'veryLight'),),
    (65, (30, 'lightSoft'), (60, 'light'), (None, 'bright')),
    (35, (30, 'muted'), (60, 'medium'), (None, 'vivid')),
    (25, (30, 'dim'), (70, 'dark'), (None, 'rich')),
    (None, (30, 'charcoal'), (70, 'deep'), (None, 'inky')),
)

TONE_VOCABULARY = frozenset(word for words in TONE_BUCKETS.values() for word in words)

TOKEN_STRIP_PATTERN = re.compile(r'[\s-]+')


# =============================================================================
# Hue
# =============================================================================

def hue_name(hue: float, saturation: float) -> str:
    """
    Name the hue family of a color.

    Args:
        hue: Hue angle in degrees, any value (normalized into 0-360)
        saturation: Saturation percent (0-100)

    Returns:
        A name from HUE_VOCABULARY; "Neutral" when saturation is below 8
    """
    if saturation < NEUTRAL_SATURATION_THRESHOLD:
        return NEUTRAL

    hue = hue % 360

    for band in HUE_BANDS:
        if hue < band.end:
            n = len(band.names)
            position = (hue - band.start) / (band.end - band.start)
            return band.names[min(n - 1, math.floor(position * n))]

    # Only reachable when float modulo returns exactly 360.0
    return HUE_BANDS[-1].names[-1]


# =============================================================================
# Tone
# =============================================================================

def deterministic_pick(words: tuple, h: float, s: float, l: float) -> str:
    """Pick a word from a bucket with an arithmetic hash of the HSL triple."""
    seed = math.floor((h * 7 + s * 5 + l * 3) % len(words))
    return words[seed]


def tone_bucket(saturation: float, lightness: float) -> str:
    """Return the TONE_BUCKETS key for a saturation/lightness pair."""
    for floor, *tiers in TONE_BANDS:
        if floor is not None and lightness <= floor:
            continue
        for ceiling, bucket in tiers:
            if ceiling is None or saturation < ceiling:
                return bucket


def tone_name(saturation: float, lightness: float, hue: float) -> str:
    """Tone adjective for a color, e.g. "Pale", "Vivid", "Inky"."""
    bucket = TONE_BUCKETS[tone_bucket(saturation, lightness)]
    return deterministic_pick(bucket, hue, saturation, lightness)


# =============================================================================
# Classification
# =============================================================================

@dataclass(frozen=True)
class ColorClassification:
    """Name and coordinates derived from a single hex color."""
    full_name: str  # "Bright Azure"
    token_name: str  # "brightAzure"
    tone: str
    hue_group: str
    hsl: HSL

    def to_dict(self) -> dict:
        return {
            'fullName': self.full_name,
            'tokenName': self.token_name,
            'tone': self.tone,
            'hueGroup': self.hue_group,
            'hsl': {'h': self.hsl.h, 's': self.hsl.s, 'l': self.hsl.l},
        }


def to_token_name(full_name: str) -> str:
    """camelCase identifier: drop whitespace/hyphens, lowercase the first char."""
    stripped = TOKEN_STRIP_PATTERN.sub('', full_name)
    return stripped[:1].lower() + stripped[1:]


def classify_hex_color(hex_color: str) -> ColorClassification:
    """
    Classify a hex color and generate a descriptive name.

    Raises:
        InvalidColorFormat: If hex_color is not #RGB or #RRGGBB
    """
    hsl = rgb_to_hsl(*hex_to_rgb(hex_color))

    hue_group = hue_name(hsl.h, hsl.s)
    tone = tone_name(hsl.s, hsl.l, hsl.h)

    full_name = f"{tone} {NEUTRAL}" if hue_group == NEUTRAL else f"{tone} {hue_group}"

    return ColorClassification(
        full_name=full_name,
        token_name=to_token_name(full_name),
        tone=tone,
        hue_group=hue_group,
        hsl=hsl,
    )
