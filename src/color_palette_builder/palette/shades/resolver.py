"""
resolver.py.
===========

Does: Flatten a nested color → shade → value table into ColorEntry records,
      applying the blacklist, the shade-selection policy and the naming rules.
Returns: resolve_shades() for one base color, resolve_shade_table() for a table.
Used By: Tailwind source adapter, palette orchestrator.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping

from color_palette_builder.palette.shades.naming import title
from color_palette_builder.palette.shades.policy import SingleDefault, ShadeSelectionPolicy
from color_palette_builder.palette.types import ColorEntry, ShadeTable, ShadeValue
from color_palette_builder.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_KEY", "resolve_shades", "resolve_shade_table"]

DEFAULT_KEY = "default"


def _is_default_key(key: str) -> bool:
    return key.lower() == DEFAULT_KEY


def _shade_entry(base_name: str, key: str, color: str, policy: ShadeSelectionPolicy) -> ColorEntry:
    name = title(base_name, key, policy.labels) if policy.suffixed else title(base_name)
    return ColorEntry(name=name, slug=f"{base_name}-{key}", color=color)


def resolve_shades(
    base_name: str,
    value: ShadeValue,
    policy: ShadeSelectionPolicy | None = None,
    blacklist: Collection[str] = (),
) -> list[ColorEntry]:
    """
    Does: Expand one table entry.

    - blacklisted or empty base names emit nothing
    - a plain string emits one entry slugged after the base name
    - a `default` shade key is emitted under every policy, without a suffix
    - other shades are emitted in table order when the policy selects them
    """
    if policy is None:
        policy = SingleDefault()

    if not base_name or base_name in blacklist:
        debug(f"skip base {base_name!r} (blacklisted or empty)", topic="shades")
        return []

    if isinstance(value, str):
        return [ColorEntry(name=title(base_name), slug=base_name, color=value)]

    if not isinstance(value, Mapping):
        logger.debug("Ignoring %r: unsupported shade value %s", base_name, type(value).__name__)
        return []

    available = list(value.keys())
    selected = set(policy.select(k for k in available if not _is_default_key(k)))

    entries: list[ColorEntry] = []
    for key in available:
        if _is_default_key(key):
            entries.append(ColorEntry(name=title(base_name), slug=base_name, color=value[key]))
        elif key in selected:
            entries.append(_shade_entry(base_name, key, value[key], policy))

    debug(f"{base_name}: {len(entries)}/{len(available)} shades kept", topic="shades")
    return entries


def resolve_shade_table(
    table: ShadeTable,
    policy: ShadeSelectionPolicy | None = None,
    blacklist: Collection[str] = (),
) -> list[ColorEntry]:
    """Does: Flatten a whole ShadeTable, preserving base-name and shade order."""
    out: list[ColorEntry] = []
    for base_name, value in table.items():
        out.extend(resolve_shades(base_name, value, policy, blacklist))
    return out
