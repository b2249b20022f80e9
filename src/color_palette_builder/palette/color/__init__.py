"""
color.
=====

Does: Color parsing (CSS notations → RGB/HSV) and grayscale detection.
Used By: PaletteBuilder classification.
"""

from .grayscale import (
    is_exact_gray,
    is_grayscale,
    is_perceptual_gray,
    perceptual_gray_threshold,
)
from .parser import (
    ParsedColor,
    is_valid_color,
    parse_color,
    rgb_to_hsv,
)

__all__ = [
    # parser
    "ParsedColor",
    "parse_color",
    "is_valid_color",
    "rgb_to_hsv",
    # grayscale
    "is_exact_gray",
    "is_perceptual_gray",
    "is_grayscale",
    "perceptual_gray_threshold",
]

__docformat__ = "google"
