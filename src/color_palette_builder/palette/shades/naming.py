"""
naming.

Does: Turn kebab/snake/camel color keys into display titles ("light-blue" → "Light Blue")
      and attach shade labels ("Blue (500)" or "Dark Blue" when a label mapping applies).
Returns: start_case(), title().
Used by: ShadeResolver and the Sass source adapter.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Mapping

__all__ = ["split_words", "start_case", "title"]

# Runs of letters/digits in any script; separators are everything else.
_CHUNK_RE = re.compile(r"[^\W_]+")


def _is_boundary(prev: str, ch: str, nxt: str) -> bool:
    if prev.isdigit() != ch.isdigit():
        return True
    if prev.islower() and ch.isupper():
        return True
    # acronym end: "XMLColor" splits before "C"
    return prev.isupper() and ch.isupper() and nxt.islower()


def _humps(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for i in range(1, len(chunk)):
        if _is_boundary(chunk[i - 1], chunk[i], chunk[i + 1 : i + 2]):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def split_words(value: str) -> list[str]:
    """Does: Split on separators, camel humps and letter/digit boundaries (Unicode-aware)."""
    text = unicodedata.normalize("NFC", value or "")
    return [w for chunk in _CHUNK_RE.findall(text) for w in _humps(chunk)]


def start_case(value: str) -> str:
    """Does: Capitalise each word and join with single spaces ("darkGray-2" → "Dark Gray 2")."""
    return " ".join(w.capitalize() for w in split_words(value))


def title(
    value: str,
    description: str | None = None,
    labels: Mapping[str, str] | None = None,
) -> str:
    """
    Does: Build a display name for a color key and optional shade.
    Returns: "<label> <Value>" when `labels` maps the shade, otherwise
             "<Value> (<Description>)", or just "<Value>" without a shade.
    """
    name = start_case(value)

    if description and labels is not None and description in labels:
        return f"{labels[description]} {name}".strip()

    if description:
        return f"{name} ({title(description)})"
    return name
