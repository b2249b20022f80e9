"""
shades
Does: Expose shade-selection policies, naming and the shade-table resolver.
Exports: policy variants, policy_from_option, title, resolve_shades, resolve_shade_table.
"""

from __future__ import annotations

# ── Public API re-exports ─────────────────────────────────────────────────────
from .naming import start_case, title
from .policy import (
    AllShades,
    ExplicitList,
    LabeledShades,
    ShadeSelectionPolicy,
    SingleDefault,
    policy_from_option,
)
from .resolver import resolve_shade_table, resolve_shades

__all__ = [
    "AllShades",
    "ExplicitList",
    "LabeledShades",
    "ShadeSelectionPolicy",
    "SingleDefault",
    "policy_from_option",
    "start_case",
    "title",
    "resolve_shades",
    "resolve_shade_table",
]
