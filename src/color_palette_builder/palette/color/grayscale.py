"""
grayscale.py
============

Does: Decide whether a parsed color is exact gray (R == G == B) or sits below the
      HSV saturation/value curve that makes it look gray.
Used By: PaletteBuilder, to push grayscale entries to the end of the palette.
"""

from __future__ import annotations

from color_palette_builder.palette.color.parser import HSV, RGB, ParsedColor

__all__ = [
    "CURVE_PEAK",
    "CURVE_DECAY",
    "perceptual_gray_threshold",
    "is_exact_gray",
    "is_perceptual_gray",
    "is_grayscale",
]

# v = CURVE_PEAK / (1 + CURVE_DECAY * s)
CURVE_PEAK = 1.3
CURVE_DECAY = 8.5


def perceptual_gray_threshold(saturation: float) -> float:
    """Does: Value below which a color of this saturation reads as gray."""
    return CURVE_PEAK / (1 + CURVE_DECAY * saturation)


def is_exact_gray(rgb: RGB) -> bool:
    r, g, b = rgb
    return r == g == b


def is_perceptual_gray(hsv: HSV) -> bool:
    """
    Does: Test a color against the gray curve in the HSV cylinder.

    The neutral axis of the cylinder is gray; desaturated colors look achromatic
    whatever their hue, and dark colors need more saturation before the hue shows.
    At s=0 the threshold is 1.3, so every value passes; at s=1 only v < ~0.133 does.
    """
    _, s, v = hsv
    return v < perceptual_gray_threshold(s)


def is_grayscale(color: ParsedColor) -> bool:
    """Does: Either check passing is enough."""
    return is_exact_gray(color.rgb) or is_perceptual_gray(color.hsv)
