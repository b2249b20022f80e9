"""
parser.py
=========

Does: Parse CSS color strings (hex, named, rgb()/rgba(), hsl()/hsla()) into RGB
      plus HSV components, returning None instead of raising on anything else.
Used By: Grayscale classification and palette ordering.
Returns: ParsedColor | None, and an is_valid_color() predicate.
"""

from __future__ import annotations

import colorsys
import logging
import re
from dataclasses import dataclass

import webcolors

__all__ = [
    "RGB",
    "HSV",
    "ParsedColor",
    "parse_color",
    "is_valid_color",
    "rgb_to_hsv",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[float, float, float]
HSV = tuple[float, float, float]


@dataclass(frozen=True)
class ParsedColor:
    """RGB channels in [0, 255]; hue in degrees, saturation/value in [0, 1]."""

    r: float
    g: float
    b: float
    h: float
    s: float
    v: float

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    @property
    def hsv(self) -> HSV:
        return (self.h, self.s, self.v)


# =============================================================================
# 1) NOTATION PATTERNS
# =============================================================================

_INT = r"\s*([+-]?\d+)\s*"
_NUM = r"\s*([+-]?(?:\d*\.)?\d+(?:[eE][+-]?\d+)?)\s*"
_PCT = _NUM + "%"

_HEX_RE = re.compile(r"^#([0-9a-f]{3,8})$")
_RGB_INT_RE = re.compile(rf"^rgb\({_INT},{_INT},{_INT}\)$")
_RGB_PCT_RE = re.compile(rf"^rgb\({_PCT},{_PCT},{_PCT}\)$")
_RGBA_INT_RE = re.compile(rf"^rgba\({_INT},{_INT},{_INT},{_NUM}\)$")
_RGBA_PCT_RE = re.compile(rf"^rgba\({_PCT},{_PCT},{_PCT},{_NUM}\)$")
_HSL_RE = re.compile(rf"^hsl\({_NUM},{_PCT},{_PCT}\)$")
_HSLA_RE = re.compile(rf"^hsla\({_NUM},{_PCT},{_PCT},{_NUM}\)$")


# =============================================================================
# 2) PER-NOTATION DECODERS
# =============================================================================

def _from_hex(digits: str) -> RGB | None:
    # alpha digits (#rgba / #rrggbbaa) are dropped; only the color channels matter
    if len(digits) == 4:
        digits = digits[:3]
    elif len(digits) == 8:
        digits = digits[:6]
    elif len(digits) not in (3, 6):
        return None
    r, g, b = webcolors.hex_to_rgb(f"#{digits}")
    return (float(r), float(g), float(b))


def _from_name(name: str) -> RGB | None:
    try:
        r, g, b = webcolors.name_to_rgb(name)
    except ValueError:
        return None
    return (float(r), float(g), float(b))


def _from_int_channels(groups: tuple[str, ...]) -> RGB:
    r, g, b = webcolors.normalize_integer_triplet(tuple(int(x) for x in groups[:3]))
    return (float(r), float(g), float(b))


def _from_pct_channels(groups: tuple[str, ...]) -> RGB:
    r, g, b = webcolors.rgb_percent_to_rgb(tuple(f"{float(x):g}%" for x in groups[:3]))
    return (float(r), float(g), float(b))


def _from_hsl(groups: tuple[str, ...]) -> RGB:
    h = (float(groups[0]) % 360.0) / 360.0
    s = min(max(float(groups[1]) / 100.0, 0.0), 1.0)
    lum = min(max(float(groups[2]) / 100.0, 0.0), 1.0)
    r, g, b = colorsys.hls_to_rgb(h, lum, s)
    return (r * 255.0, g * 255.0, b * 255.0)


def _decode_rgb(text: str) -> RGB | None:
    """Does: Dispatch one normalized string to the decoder for its notation."""
    m = _HEX_RE.match(text)
    if m:
        return _from_hex(m.group(1))

    for pattern, decoder in (
        (_RGB_INT_RE, _from_int_channels),
        (_RGB_PCT_RE, _from_pct_channels),
        (_RGBA_INT_RE, _from_int_channels),
        (_RGBA_PCT_RE, _from_pct_channels),
        (_HSL_RE, _from_hsl),
        (_HSLA_RE, _from_hsl),
    ):
        m = pattern.match(text)
        if m:
            return decoder(m.groups())

    return _from_name(text)


# =============================================================================
# 3) HSV CONVERSION
# =============================================================================

def rgb_to_hsv(rgb: RGB) -> HSV:
    """Does: Convert 0–255 RGB into (hue degrees, saturation, value) via matplotlib."""
    from matplotlib.colors import rgb_to_hsv as _mpl_rgb_to_hsv  # lazy import

    unit = [min(max(c / 255.0, 0.0), 1.0) for c in rgb]
    h, s, v = (float(x) for x in _mpl_rgb_to_hsv(unit))
    return (h * 360.0, s, v)


# =============================================================================
# 4) PUBLIC API
# =============================================================================

def _parse_normalized(text: str) -> ParsedColor | None:
    try:
        rgb = _decode_rgb(text)
    except ValueError:
        logger.debug("Rejected color notation: %r", text)
        return None
    if rgb is None:
        return None
    h, s, v = rgb_to_hsv(rgb)
    return ParsedColor(*rgb, h, s, v)


def parse_color(raw: object) -> ParsedColor | None:
    """Does: Parse a CSS color string; None when it is not a recognized color."""
    if not isinstance(raw, str):
        return None
    text = raw.strip().lower()
    if not text:
        return None
    return _parse_normalized(text)


def is_valid_color(raw: object) -> bool:
    """Does: True iff parse_color() recognizes the string."""
    return parse_color(raw) is not None
