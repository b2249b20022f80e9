# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Turn user options into a palette: merge them over the defaults, read the
      Tailwind and Sass sources, order them by priority, build and write the artifact.
Returns:
  - load_options(file) / options_from_dict(raw) -> PaletteOptions
  - collect_sources(options) -> (primary, secondary)
  - build_from_options(options) -> list[ColorEntry]
  - run(options) -> list[ColorEntry]   (also writes options.output)
Used by: CLI and build scripts.
"""

import copy
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from color_palette_builder.palette.builder import build_palette
from color_palette_builder.palette.output import OutputMode, write_palette
from color_palette_builder.palette.shades.policy import ShadeSelectionPolicy, policy_from_option
from color_palette_builder.palette.sources.sass import load_sass_colors
from color_palette_builder.palette.sources.tailwind import load_tailwind_colors
from color_palette_builder.palette.types import ColorEntry
from color_palette_builder.utils.load_config import ConfigTypeError, load_config, resolve_base_dir
from color_palette_builder.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_OPTIONS",
    "TailwindOptions",
    "SassOptions",
    "PaletteOptions",
    "merge_options",
    "options_from_dict",
    "load_options",
    "collect_sources",
    "build_from_options",
    "run",
]

DEFAULT_OPTIONS: dict[str, Any] = {
    "output": "palette.json",
    "blacklist": ["transparent", "inherit"],
    "priority": "tailwind",
    "pretty": False,
    "mode": "palette",
    "tailwind": {
        "config": "./tailwind.config.js",
        "shades": False,
        "path": "colors",
    },
    "sass": {
        "path": "resources/assets/styles/config",
        "files": ["variables.scss"],
        "variables": ["colors"],
    },
}


# ── Option records ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class TailwindOptions:
    config: str = "./tailwind.config.js"
    path: str = "colors"
    policy: ShadeSelectionPolicy = field(default_factory=lambda: policy_from_option(False))


@dataclass(frozen=True)
class SassOptions:
    path: str | None = "resources/assets/styles/config"
    files: tuple[str, ...] = ("variables.scss",)
    variables: tuple[str, ...] = ("colors",)


@dataclass(frozen=True)
class PaletteOptions:
    output: str = "palette.json"
    blacklist: tuple[str, ...] = ("transparent", "inherit")
    priority: str = "tailwind"
    pretty: bool = False
    mode: OutputMode = "palette"
    tailwind: TailwindOptions | None = field(default_factory=TailwindOptions)
    sass: SassOptions | None = field(default_factory=SassOptions)
    base_dir: Path | None = None

    @property
    def tailwind_first(self) -> bool:
        return "tailwind" in self.priority


# ── Merging & coercion ───────────────────────────────────────────────────────
def merge_options(base: Mapping[str, Any], override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Does: Deep-merge `override` into a copy of `base`; lists and scalars replace."""
    out = copy.deepcopy(dict(base))
    for key, value in (override or {}).items():
        if isinstance(value, Mapping) and isinstance(out.get(key), Mapping):
            out[key] = merge_options(out[key], value)
        else:
            out[key] = copy.deepcopy(value)
    return out


def _str_tuple(value: Any, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    raise ConfigTypeError(f"{name}: expected string or list, got {type(value).__name__}")


def _tailwind_from(raw: Any) -> TailwindOptions | None:
    if not raw:
        return None
    if not isinstance(raw, Mapping):
        raise ConfigTypeError(f"tailwind: expected object or false, got {type(raw).__name__}")
    return TailwindOptions(
        config=str(raw.get("config") or "./tailwind.config.js"),
        path=str(raw.get("path") or "colors"),
        policy=policy_from_option(raw.get("shades"), suffix=raw.get("suffix")),
    )


def _sass_from(raw: Any) -> SassOptions | None:
    if not raw:
        return None
    if not isinstance(raw, Mapping):
        raise ConfigTypeError(f"sass: expected object or false, got {type(raw).__name__}")
    if not raw.get("files"):
        return None
    return SassOptions(
        path=raw.get("path") or None,
        files=_str_tuple(raw.get("files"), "sass.files"),
        variables=_str_tuple(raw.get("variables"), "sass.variables"),
    )


def options_from_dict(
    raw: Mapping[str, Any] | None = None,
    *,
    base_dir: str | os.PathLike[str] | None = None,
) -> PaletteOptions:
    """Does: Merge `raw` over DEFAULT_OPTIONS and decide the shade policy once."""
    merged = merge_options(DEFAULT_OPTIONS, raw)

    mode = merged.get("mode") or "palette"
    if mode not in ("palette", "theme"):
        raise ConfigTypeError(f"mode: expected 'palette' or 'theme', got {mode!r}")

    priority = merged.get("priority") or "tailwind"
    if isinstance(priority, (list, tuple)):
        priority = ",".join(str(p) for p in priority)

    return PaletteOptions(
        output=str(merged.get("output") or "palette.json"),
        blacklist=_str_tuple(merged.get("blacklist"), "blacklist"),
        priority=str(priority),
        pretty=bool(merged.get("pretty")),
        mode=mode,
        tailwind=_tailwind_from(merged.get("tailwind")),
        sass=_sass_from(merged.get("sass")),
        base_dir=resolve_base_dir(base_dir),
    )


def load_options(
    file: str | os.PathLike[str],
    *,
    base_dir: str | os.PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> PaletteOptions:
    """Does: Read a JSON options file (relative to `base_dir`) and apply `overrides` on top."""
    raw = load_config(file, mode="validated_dict", base_dir=base_dir)
    return options_from_dict(merge_options(raw, overrides), base_dir=base_dir)


# ── Pipeline ─────────────────────────────────────────────────────────────────
def collect_sources(options: PaletteOptions) -> tuple[list[ColorEntry], list[ColorEntry]]:
    """Does: Read both sources and return them as (primary, secondary) by priority."""
    tailwind: list[ColorEntry] = []
    if options.tailwind is not None:
        tailwind = load_tailwind_colors(
            options.tailwind.config,
            options.tailwind.path,
            policy=options.tailwind.policy,
            blacklist=options.blacklist,
            base_dir=options.base_dir,
        )

    sass: list[ColorEntry] = []
    if options.sass is not None:
        sass = load_sass_colors(
            options.sass.path,
            options.sass.files,
            options.sass.variables,
            base_dir=options.base_dir,
        )

    debug(f"sources: tailwind={len(tailwind)} sass={len(sass)} priority={options.priority}", topic="orchestrator")
    return (tailwind, sass) if options.tailwind_first else (sass, tailwind)


def build_from_options(options: PaletteOptions | None = None) -> list[ColorEntry]:
    options = options or options_from_dict()
    primary, secondary = collect_sources(options)
    return build_palette(primary, secondary)


def run(options: PaletteOptions | None = None) -> list[ColorEntry]:
    """Does: Build the palette and write it to options.output (relative to base_dir)."""
    options = options or options_from_dict()
    palette = build_from_options(options)
    target = resolve_base_dir(options.base_dir) / options.output
    write_palette(palette, target, pretty=options.pretty, mode=options.mode)
    return palette
