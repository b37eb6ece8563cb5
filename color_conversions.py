#!/usr/bin/env python3
"""
Color space conversions between hex, RGB, HSL and HSV.

Pure numeric transforms used by naming and palette synthesis.
"""

import math
import re
from typing import NamedTuple

import numpy as np


# =============================================================================
# Types
# =============================================================================

class RGB(NamedTuple):
    """RGB channels, each 0-255."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""
    h: float
    s: float
    l: float


class HSV(NamedTuple):
    """Hue in degrees (0-360), saturation and value in percent (0-100)."""
    h: float
    s: float
    v: float


class InvalidColorFormat(ValueError):
    """Raised when a string is not a #RGB or #RRGGBB hex color."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f'Invalid hex color format: "{value}". Expected format: #RGB or #RRGGBB'
        )


HEX_PATTERN = re.compile(r'[0-9A-Fa-f]{6}')


# =============================================================================
# Helpers
# =============================================================================

def round_half_up(x: float) -> int:
    """Round to the nearest integer, rounding halves up."""
    return int(math.floor(x + 0.5))


def _clamp(x: float, low: float, high: float) -> float:
    return max(low, min(high, x))


def _wrap_hue(h: float) -> float:
    return h % 360


# =============================================================================
# Hex <-> RGB
# =============================================================================

def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a hex color string.

    Args:
        hex_color: "#RRGGBB", "#RGB", with or without the leading '#'

    Returns:
        RGB tuple with channels 0-255

    Raises:
        InvalidColorFormat: If the string is not 3 or 6 hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)

    clean = hex_color[1:] if hex_color.startswith('#') else hex_color

    # Expand shorthand ("03F" -> "0033FF")
    if len(clean) == 3:
        clean = ''.join(ch * 2 for ch in clean)

    if not HEX_PATTERN.fullmatch(clean):
        raise InvalidColorFormat(hex_color)

    return RGB(int(clean[0:2], 16), int(clean[2:4], 16), int(clean[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels to uppercase "#RRGGBB", clamping to 0-255."""
    channels = [round_half_up(_clamp(c, 0, 255)) for c in (r, g, b)]
    return '#' + ''.join(f'{c:02X}' for c in channels)


def normalize_hex(hex_color: str) -> str:
    """Validate a hex color and return it as uppercase "#RRGGBB"."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def hex_list_to_rgb_array(hex_colors) -> np.ndarray:
    """Convert a sequence of hex strings to an (n, 3) float array of channels."""
    return np.array([hex_to_rgb(h) for h in hex_colors], dtype=np.float64).reshape(-1, 3)


# =============================================================================
# RGB <-> HSL
# =============================================================================

def _hue_from_rgb(r: float, g: float, b: float, max_c: float, diff: float) -> float:
    """Hue fraction (0-1) for normalized channels with a non-zero spread."""
    if max_c == r:
        return ((g - b) / diff + (6 if g < b else 0)) / 6
    if max_c == g:
        return ((b - r) / diff + 2) / 6
    return ((r - g) / diff + 4) / 6


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB (0-255) to HSL."""
    r, g, b = (_clamp(c, 0, 255) / 255 for c in (r, g, b))

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if diff != 0:
        s = diff / (2 - max_c - min_c) if l > 0.5 else diff / (max_c + min_c)
        h = _hue_from_rgb(r, g, b, max_c, diff)

    return HSL(h * 360, s * 100, l * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB.

    Hue wraps around 360; saturation and lightness are clamped to 0-100.
    A saturation of 0 yields a gray with every channel at round(l * 255).
    """
    h = _wrap_hue(h) / 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100

    if s == 0:
        v = round_half_up(l * 255)
        return RGB(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGB(
        round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        round_half_up(_hue_to_channel(p, q, h) * 255),
        round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


# =============================================================================
# RGB <-> HSV
# =============================================================================

def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert RGB (0-255) to HSV."""
    r, g, b = (_clamp(c, 0, 255) / 255 for c in (r, g, b))

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    h = 0.0
    s = 0.0 if max_c == 0 else diff / max_c

    if diff != 0:
        h = _hue_from_rgb(r, g, b, max_c, diff)

    return HSV(h * 360, s * 100, max_c * 100)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV to RGB. Hue wraps around 360; s and v are clamped to 0-100."""
    h = _wrap_hue(h) / 360
    s = _clamp(s, 0, 100) / 100
    v = _clamp(v, 0, 100) / 100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


# =============================================================================
# Composite wrappers
# =============================================================================

def hex_to_hsl(hex_color: str) -> HSL:
    """Convert hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_hsv(hex_color: str) -> HSV:
    """Convert hex to HSV."""
    return rgb_to_hsv(*hex_to_rgb(hex_color))


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """Convert HSV to hex."""
    return rgb_to_hex(*hsv_to_rgb(h, s, v))
