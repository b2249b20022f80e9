"""
output.py
=========

Does: Serialize a palette to the JSON artifact, either as a bare array or spliced
      into a block-theme `theme.json` document under settings.color.palette.
Returns: render_palette() -> str, write_palette() -> Path.
Used By: Palette orchestrator and CLI.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Literal

from color_palette_builder.palette.types import ColorEntry
from color_palette_builder.utils.load_config import ConfigTypeError, load_json_file

__all__ = [
    "OutputMode",
    "THEME_SKELETON",
    "palette_payload",
    "render_palette",
    "merge_into_theme",
    "write_palette",
]

logger = logging.getLogger(__name__)

OutputMode = Literal["palette", "theme"]

THEME_SKELETON: dict[str, Any] = {"version": 2, "settings": {"color": {}}}


def palette_payload(entries: Iterable[ColorEntry]) -> list[dict[str, str]]:
    return [e.to_dict() for e in entries]


def _dumps(data: Any, pretty: bool) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def render_palette(entries: Iterable[ColorEntry], pretty: bool = False) -> str:
    """Does: JSON array of {name, slug, color}; compact unless `pretty` (2-space indent)."""
    return _dumps(palette_payload(entries), pretty)


def merge_into_theme(document: dict[str, Any] | None, entries: Iterable[ColorEntry]) -> dict[str, Any]:
    """Does: Return a copy of `document` (or the skeleton) with settings.color.palette replaced."""
    doc = json.loads(json.dumps(document if document is not None else THEME_SKELETON))
    settings = doc.setdefault("settings", {})
    if not isinstance(settings, dict):
        raise ConfigTypeError(f"theme.json: 'settings' must be an object, got {type(settings).__name__}")
    color = settings.setdefault("color", {})
    if not isinstance(color, dict):
        raise ConfigTypeError(f"theme.json: 'settings.color' must be an object, got {type(color).__name__}")
    color["palette"] = palette_payload(entries)
    return doc


def write_palette(
    entries: Iterable[ColorEntry],
    target: str | os.PathLike[str],
    *,
    pretty: bool = False,
    mode: OutputMode = "palette",
) -> Path:
    """Does: Write the artifact to `target`, creating parent directories."""
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)

    if mode == "theme":
        existing = load_json_file(path) if path.is_file() else None
        if existing is not None and not isinstance(existing, dict):
            raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(existing).__name__}")
        text = _dumps(merge_into_theme(existing, entries), pretty)
    elif mode == "palette":
        text = render_palette(entries, pretty)
    else:
        raise ValueError(f"Unknown output mode '{mode}'")

    path.write_text(text, encoding="utf-8")
    logger.info("Wrote palette to %s (%s mode)", path, mode)
    return path
