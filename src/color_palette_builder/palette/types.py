# src/color_palette_builder/palette/types.py
"""
types.py.

Does: Define the palette data model shared by parsers, resolvers and the builder.
Returns: ColorEntry (frozen record), ShadeTable alias and the Classification tag.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Union

__all__ = ["ColorEntry", "ShadeValue", "ShadeTable", "Classification"]

# Insertion order of base names and shade keys is significant.
ShadeValue = Union[str, dict[str, str]]
ShadeTable = dict[str, ShadeValue]


@dataclass(frozen=True)
class ColorEntry:
    """One palette color: display name (dedup key), URL-safe slug, raw color string."""

    name: str
    slug: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class Classification(str, Enum):
    CHROMATIC = "chromatic"
    NON_STANDARD_NOTATION = "non-standard-notation"
    UNPARSABLE = "unparsable"
    GRAYSCALE = "grayscale"


__docformat__ = "google"
