# src/color_palette_builder/palette/shades/policy.py
"""
policy.py.

Does: Model the shade-selection policy as a closed set of variants decided once,
      when options load, so the resolver never inspects raw option shapes.
Returns: SingleDefault | AllShades | ExplicitList | LabeledShades and
         policy_from_option() to build one from the `tailwind.shades` option.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from color_palette_builder.utils.load_config import ConfigTypeError

__all__ = [
    "DEFAULT_SHADE",
    "SingleDefault",
    "AllShades",
    "ExplicitList",
    "LabeledShades",
    "ShadeSelectionPolicy",
    "policy_from_option",
]

log = logging.getLogger(__name__)

DEFAULT_SHADE = "500"


@dataclass(frozen=True)
class SingleDefault:
    """Only the `500` shade, named after the base color."""

    key: str = DEFAULT_SHADE

    suffixed = False
    labels = None

    def select(self, available: Iterable[str]) -> list[str]:
        return [k for k in available if k == self.key]


@dataclass(frozen=True)
class AllShades:
    """Every shade; `suffixed` appends the shade key to the display name."""

    suffixed: bool = False

    labels = None

    def select(self, available: Iterable[str]) -> list[str]:
        return list(available)


@dataclass(frozen=True)
class ExplicitList:
    """Shades named in `keys`, kept in the table's own order."""

    keys: tuple[str, ...] = ()
    suffixed: bool = False

    labels = None

    def select(self, available: Iterable[str]) -> list[str]:
        wanted = set(self.keys)
        return [k for k in available if k in wanted]


@dataclass(frozen=True)
class LabeledShades:
    """Shades named in `labels`; each display name is `"<label> <Base>"`."""

    labels: Mapping[str, str] = field(default_factory=dict)

    suffixed = True

    def select(self, available: Iterable[str]) -> list[str]:
        return [k for k in available if k in self.labels]


ShadeSelectionPolicy = Union[SingleDefault, AllShades, ExplicitList, LabeledShades]


def policy_from_option(raw: Any, *, suffix: bool | None = None) -> ShadeSelectionPolicy:
    """
    Does: Map the `tailwind.shades` option to a policy.

    false/None/"false" → SingleDefault, true/"true" → AllShades,
    list → ExplicitList, mapping → LabeledShades. `suffix` overrides whether
    list/all policies append the shade key to names (default: they do).
    """
    suffixed = True if suffix is None else bool(suffix)

    if raw is None or raw is False or (isinstance(raw, str) and raw.strip().lower() in ("", "false")):
        return SingleDefault()
    if raw is True or (isinstance(raw, str) and raw.strip().lower() == "true"):
        return AllShades(suffixed=suffixed)
    if isinstance(raw, Mapping):
        return LabeledShades(labels={str(k): str(v) for k, v in raw.items()})
    if isinstance(raw, (list, tuple)):
        return ExplicitList(keys=tuple(str(k) for k in raw), suffixed=suffixed)

    raise ConfigTypeError(
        f"tailwind.shades: expected bool, list or mapping, got {type(raw).__name__}"
    )
