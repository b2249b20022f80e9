# builder.py
from __future__ import annotations

"""
builder.py
==========

Does: Reconcile two color sources into one palette: dedupe by name (first source
      wins), classify each color, and order chromatic colors first, anything that
      could not be confirmed as a plain color next, and grayscale last.
Returns:
  - build_palette(primary, secondary) -> list[ColorEntry]
  - the individual stages (dedupe_by_name, classify_entry, classify_entries,
    sort_by_name, order_palette) for direct use and testing
Used by: Palette orchestrator and CLI.
"""

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from color_palette_builder.palette.color import is_grayscale, parse_color
from color_palette_builder.palette.types import Classification, ColorEntry
from color_palette_builder.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "NOTATION_RE",
    "GROUP_ORDER",
    "SORT_TIERS",
    "dedupe_by_name",
    "looks_like_color_function",
    "classify_entry",
    "classify_entries",
    "sort_by_name",
    "order_palette",
    "build_palette",
]

# rgb()/rgba()/hsl()/hsla() shaped, even when the parser rejects the contents
NOTATION_RE = re.compile(r"^(?:rgb|hsl)a?\(.+?\)$", re.IGNORECASE)

GROUP_ORDER: tuple[Classification, ...] = (
    Classification.CHROMATIC,
    Classification.NON_STANDARD_NOTATION,
    Classification.UNPARSABLE,
    Classification.GRAYSCALE,
)

# Each tier is sorted by name as a whole; grayscale always comes last.
SORT_TIERS: tuple[tuple[Classification, ...], ...] = (
    (
        Classification.CHROMATIC,
        Classification.NON_STANDARD_NOTATION,
        Classification.UNPARSABLE,
    ),
    (Classification.GRAYSCALE,),
)


# ── Stage 1: merge ───────────────────────────────────────────────────────────
def dedupe_by_name(*sources: Iterable[ColorEntry] | None) -> list[ColorEntry]:
    """Does: Concatenate sources in priority order, keeping the first entry per name."""
    seen: set[str] = set()
    out: list[ColorEntry] = []
    for source in sources:
        for entry in source or ():
            if entry.name in seen:
                debug(f"duplicate {entry.name!r} ({entry.color}) dropped", topic="builder")
                continue
            seen.add(entry.name)
            out.append(entry)
    return out


# ── Stage 2: classify ────────────────────────────────────────────────────────
def looks_like_color_function(color: object) -> bool:
    return isinstance(color, str) and NOTATION_RE.match(color) is not None


def classify_entry(entry: ColorEntry) -> Classification:
    """Does: Tag one entry; never raises."""
    parsed = parse_color(entry.color)
    if parsed is None:
        if looks_like_color_function(entry.color):
            return Classification.NON_STANDARD_NOTATION
        return Classification.UNPARSABLE
    if is_grayscale(parsed):
        return Classification.GRAYSCALE
    return Classification.CHROMATIC


def classify_entries(entries: Iterable[ColorEntry]) -> dict[Classification, list[ColorEntry]]:
    """Does: Partition entries into one list per Classification, input order kept."""
    groups: dict[Classification, list[ColorEntry]] = {c: [] for c in GROUP_ORDER}
    for entry in entries:
        groups[classify_entry(entry)].append(entry)
    return groups


# ── Stage 3: order ───────────────────────────────────────────────────────────
def sort_by_name(entries: Iterable[ColorEntry]) -> list[ColorEntry]:
    """Does: Stable ordinal sort on name."""
    return sorted(entries, key=lambda e: e.name)


def order_palette(groups: Mapping[Classification, Sequence[ColorEntry]]) -> list[ColorEntry]:
    """Does: Concatenate the groups of each tier in GROUP_ORDER, then sort the tier by name."""
    out: list[ColorEntry] = []
    for tier in SORT_TIERS:
        combined = [e for cls in tier for e in groups.get(cls, ())]
        out.extend(sort_by_name(combined))
    return out


# ── Root ─────────────────────────────────────────────────────────────────────
def build_palette(
    primary: Iterable[ColorEntry] | None,
    secondary: Iterable[ColorEntry] | None = None,
) -> list[ColorEntry]:
    """Does: Merge, classify and order two sources; `primary` wins name collisions."""
    merged = dedupe_by_name(primary, secondary)
    groups = classify_entries(merged)
    palette = order_palette(groups)
    logger.debug(
        "Built palette: %d entries (%s)",
        len(palette),
        ", ".join(f"{cls.value}={len(groups[cls])}" for cls in GROUP_ORDER),
    )
    return palette
