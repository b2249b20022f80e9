"""
sass.py
=======

Does: Read Sass color maps (`$colors: (primary: #525ddc, ...)`) out of .scss files
      and turn each map entry into a ColorEntry.
Used By: Palette orchestrator (one of the two palette sources).
Returns: list[ColorEntry]; empty when the directory, files or variables are missing.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from color_palette_builder.palette.shades.naming import title
from color_palette_builder.palette.types import ColorEntry
from color_palette_builder.utils.load_config import resolve_base_dir

__all__ = [
    "strip_comments",
    "parse_scss_variables",
    "load_sass_colors",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_DECL_START_RE = re.compile(r"\$([\w-]+)\s*:\s*")
_FLAGS_RE = re.compile(r"(\s*!(?:default|global))+\s*$")
_VAR_REF_RE = re.compile(r"^\$([\w-]+)$")


# =============================================================================
# 1) LEXING HELPERS
# =============================================================================

def strip_comments(text: str) -> str:
    """Does: Drop /* block */ and // line comments found outside strings and url(...)."""
    out: list[str] = []
    quote: str | None = None
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = n if end < 0 else end + 2
            continue
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = n if end < 0 else end
            continue
        elif text[i : i + 4].lower() == "url(":
            end = text.find(")", i)
            end = n if end < 0 else end + 1
            out.append(text[i:end])
            i = end
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _read_until(text: str, start: int, stop: str) -> tuple[str, int]:
    """Read from `start` to the first `stop` char at paren depth 0 (outside quotes)."""
    depth = 0
    quote: str | None = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif depth == 0 and ch in stop:
            return text[start:i], i
        i += 1
    return text[start:], len(text)


def _split_top_level(body: str) -> list[str]:
    items: list[str] = []
    pos = 0
    while pos <= len(body):
        item, end = _read_until(body, pos, ",")
        if item.strip():
            items.append(item.strip())
        pos = end + 1
    return items


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _clean_value(value: str) -> str:
    return _FLAGS_RE.sub("", value).strip()


# =============================================================================
# 2) DECLARATION PARSER
# =============================================================================

def parse_scss_variables(text: str) -> dict[str, str | dict[str, str]]:
    """
    Does: Collect top-level `$name: value;` declarations.
    Returns: {name: scalar} or {name: {key: value}} for map declarations,
             in declaration order; a later declaration replaces an earlier one.
    """
    text = strip_comments(text)
    out: dict[str, str | dict[str, str]] = {}
    pos = 0
    while True:
        m = _DECL_START_RE.search(text, pos)
        if not m:
            break
        name = m.group(1)
        raw, end = _read_until(text, m.end(), ";")
        pos = end + 1
        raw = _clean_value(raw)
        if raw.startswith("(") and raw.endswith(")"):
            entries: dict[str, str] = {}
            for item in _split_top_level(raw[1:-1]):
                key, sep, val = item.partition(":")
                if not sep:
                    continue
                entries[_unquote(key)] = _clean_value(val)
            out[name] = entries
        else:
            out[name] = raw
    return out


def _resolve_refs(value: str, scalars: dict[str, str], seen: frozenset[str] = frozenset()) -> str:
    """Does: Replace a bare `$var` value with its scalar definition (cycle-safe)."""
    m = _VAR_REF_RE.match(value)
    if not m or m.group(1) in seen or m.group(1) not in scalars:
        return value
    return _resolve_refs(scalars[m.group(1)], scalars, seen | {m.group(1)})


# =============================================================================
# 3) SOURCE ADAPTER
# =============================================================================

def _as_list(value: str | Iterable[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def load_sass_colors(
    path: str | None,
    files: str | Iterable[str] | None,
    variables: str | Iterable[str] | None,
    *,
    base_dir: str | Path | None = None,
) -> list[ColorEntry]:
    """
    Does: Extract color map entries for `variables` from the existing `files` under `path`.
    Returns: [ColorEntry(title(key), key, value), ...] in file/declaration order.
    """
    root = resolve_base_dir(base_dir)
    directory = root / path if path else root

    existing = [directory / f for f in _as_list(files) if (directory / f).is_file()]
    if not existing:
        logger.debug("No Sass files found in %s (%s)", directory, _as_list(files))
        return []

    wanted = {v.lstrip("$") for v in _as_list(variables)}
    if not wanted:
        return []

    declarations: dict[str, str | dict[str, str]] = {}
    for file in existing:
        declarations.update(parse_scss_variables(file.read_text(encoding="utf-8")))

    scalars = {k: v for k, v in declarations.items() if isinstance(v, str)}
    entries: list[ColorEntry] = []
    for name, value in declarations.items():
        if name not in wanted or not isinstance(value, dict):
            continue
        for key, color in value.items():
            entries.append(ColorEntry(name=title(key), slug=key, color=_resolve_refs(color, scalars)))

    if not entries:
        logger.debug("No Sass color maps named %s in %s", sorted(wanted), [f.name for f in existing])
    return entries
