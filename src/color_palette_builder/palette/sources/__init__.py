"""
sources
Does: Adapters that read raw color definitions from Sass files and Tailwind configs.
Exports: load_sass_colors, load_tailwind_table, load_tailwind_colors.
"""

from __future__ import annotations

from .sass import load_sass_colors, parse_scss_variables
from .tailwind import get_path, load_tailwind_colors, load_tailwind_table

__all__ = [
    "load_sass_colors",
    "parse_scss_variables",
    "get_path",
    "load_tailwind_table",
    "load_tailwind_colors",
]
