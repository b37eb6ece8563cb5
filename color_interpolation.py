#!/usr/bin/env python3
"""
Barycentric color interpolation across a triangle of three colors.

Useful for triangular color pickers or blending three swatches.
"""

from typing import NamedTuple

import numpy as np

from color_conversions import hex_list_to_rgb_array, rgb_to_hex


class ColorVertex(NamedTuple):
    """A triangle corner carrying a hex color."""
    x: float
    y: float
    color: str


def barycentric_weights(p, a, b, c) -> np.ndarray:
    """
    Barycentric weights (w, u, v) of point p for triangle a, b, c.

    Weights sum to 1; all are non-negative when p lies inside the triangle.

    Raises:
        ValueError: If the triangle has zero area
    """
    a_xy = np.array(a[:2], dtype=np.float64)
    v0 = np.array(b[:2], dtype=np.float64) - a_xy
    v1 = np.array(c[:2], dtype=np.float64) - a_xy
    v2 = np.array(p[:2], dtype=np.float64) - a_xy

    dot00 = v0 @ v0
    dot01 = v0 @ v1
    dot02 = v0 @ v2
    dot11 = v1 @ v1
    dot12 = v1 @ v2

    denom = dot00 * dot11 - dot01 * dot01
    if denom == 0:
        raise ValueError(f"Degenerate triangle: {a[:2]}, {b[:2]}, {c[:2]}")

    u = (dot11 * dot02 - dot01 * dot12) / denom
    v = (dot00 * dot12 - dot01 * dot02) / denom

    return np.array([1 - u - v, u, v])


def barycentric_interpolation(p, a, b, c) -> str:
    """
    Blend the colors of a, b and c at point p.

    Args:
        p: (x, y) point to interpolate at
        a, b, c: ColorVertex (or any (x, y, hex) triple)

    Returns:
        Interpolated hex color. Points outside the triangle extrapolate and
        are clamped to the RGB cube.
    """
    weights = barycentric_weights(p, a, b, c)
    rgb = weights @ hex_list_to_rgb_array([a[2], b[2], c[2]])
    return rgb_to_hex(*rgb)
