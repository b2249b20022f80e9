"""
tailwind.py
===========

Does: Load a resolved Tailwind configuration, pull the color table out of it by
      dot-path, and flatten it with the shade resolver.
Used By: Palette orchestrator (the other palette source).
Returns: ShadeTable from load_tailwind_table(); list[ColorEntry] from load_tailwind_colors().
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Collection, Mapping
from pathlib import Path
from typing import Any

from color_palette_builder.palette.shades.policy import ShadeSelectionPolicy
from color_palette_builder.palette.shades.resolver import resolve_shade_table
from color_palette_builder.palette.types import ColorEntry, ShadeTable
from color_palette_builder.utils.load_config import (
    ConfigParseError,
    ConfigResolveError,
    load_json_file,
    resolve_base_dir,
)

__all__ = [
    "JS_SUFFIXES",
    "get_path",
    "coerce_shade_table",
    "resolve_config_with_node",
    "load_resolved_config",
    "load_tailwind_table",
    "load_tailwind_colors",
]

logger = logging.getLogger(__name__)

JS_SUFFIXES = (".js", ".cjs", ".mjs")

# Prints the fully resolved config (defaults merged in) as JSON on stdout.
_NODE_SCRIPT = (
    "const path = require('path');"
    "const resolveConfig = require('tailwindcss/resolveConfig');"
    "const config = require(path.resolve(process.argv[1]));"
    "process.stdout.write(JSON.stringify(resolveConfig(config.default || config)));"
)


# ── Config access ────────────────────────────────────────────────────────────
def get_path(config: Any, dotted: str, default: Any = None) -> Any:
    """Does: Walk `a.b.c` through nested mappings; `default` when any step is missing."""
    node = config
    for part in (p for p in dotted.split(".") if p):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


def coerce_shade_table(raw: Any) -> ShadeTable:
    """Does: Keep string colors and one level of string shades; drop everything else."""
    if not isinstance(raw, Mapping):
        return {}
    table: ShadeTable = {}
    for base, value in raw.items():
        if isinstance(value, str):
            table[str(base)] = value
        elif isinstance(value, Mapping):
            shades = {str(k): v for k, v in value.items() if isinstance(v, str)}
            if shades:
                table[str(base)] = shades
        else:
            logger.debug("Dropping color %r: unsupported value %s", base, type(value).__name__)
    return table


# ── Resolution ───────────────────────────────────────────────────────────────
def resolve_config_with_node(config_file: Path, *, node: str | None = None, timeout: float = 60.0) -> dict[str, Any]:
    """Does: Run tailwindcss/resolveConfig through node and decode the JSON it prints."""
    node_bin = node or shutil.which("node")
    if not node_bin:
        raise ConfigResolveError(f"Cannot resolve {config_file}: 'node' executable not found")

    try:
        proc = subprocess.run(
            [node_bin, "-e", _NODE_SCRIPT, str(config_file)],
            cwd=str(config_file.parent),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ConfigResolveError(f"Cannot resolve {config_file}: {e}") from e

    if proc.returncode != 0:
        raise ConfigResolveError(
            f"tailwindcss resolveConfig failed for {config_file}: {proc.stderr.strip() or proc.returncode}"
        )
    try:
        return json.loads(proc.stdout)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"resolveConfig output for {config_file} is not JSON: {e}") from e


def load_resolved_config(config: str | Path, *, base_dir: str | Path | None = None) -> dict[str, Any] | None:
    """
    Does: Load a Tailwind config: JSON directly, JS through node.
    Returns: The resolved config dict, or None when the file does not exist.
    """
    config_file = resolve_base_dir(base_dir) / config
    if not config_file.is_file():
        logger.debug("Tailwind config not found: %s", config_file)
        return None
    if config_file.suffix in JS_SUFFIXES:
        return resolve_config_with_node(config_file)
    return load_json_file(config_file)


def load_tailwind_table(
    config: str | Path,
    path: str | None = "colors",
    *,
    base_dir: str | Path | None = None,
) -> ShadeTable:
    """Does: Return the ShadeTable at `theme.<path>`; {} when the config is missing."""
    resolved = load_resolved_config(config, base_dir=base_dir)
    if resolved is None:
        return {}
    return coerce_shade_table(get_path(resolved, f"theme.{path or 'colors'}", {}))


def load_tailwind_colors(
    config: str | Path,
    path: str | None = "colors",
    *,
    policy: ShadeSelectionPolicy | None = None,
    blacklist: Collection[str] = (),
    base_dir: str | Path | None = None,
) -> list[ColorEntry]:
    """Does: Load the table and flatten it into ColorEntry records."""
    table = load_tailwind_table(config, path, base_dir=base_dir)
    return resolve_shade_table(table, policy, blacklist)
