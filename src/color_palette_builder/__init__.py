"""
color_palette_builder
=====================

Does: Root package initializer for the palette builder project.
Returns: Exposes subpackages (`palette`, `utils`) through a stable namespace.
Used by: All higher-level imports starting from `color_palette_builder.*`.
"""

__version__ = "1.0.0"

__all__: list[str] = []
__docformat__ = "google"
