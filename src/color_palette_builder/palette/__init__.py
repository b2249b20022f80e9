"""
palette
=======

Thin namespace for the palette pipeline.
- Avoid eager imports so `palette.color` can be used without loading the sources.
- Provide TYPE_CHECKING stubs so IDEs/static analyzers see symbols.

Public API:
- types       : ColorEntry, Classification
- builder     : build_palette
- orchestrator: options_from_dict, load_options, build_from_options, run
- output      : render_palette, write_palette
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import Classification, ColorEntry

# ---- Static typing / IDE stubs (do NOT run at runtime) ----------------------
if TYPE_CHECKING:
    from .builder import build_palette
    from .orchestrator import build_from_options, load_options, options_from_dict, run
    from .output import render_palette, write_palette


# ---- Lazy runtime exports (PEP 562) -----------------------------------------
def __getattr__(name: str):
    if name == "build_palette":
        from .builder import build_palette as _bp

        return _bp

    if name in ("render_palette", "write_palette"):
        from .output import render_palette as _rp, write_palette as _wp

        return {"render_palette": _rp, "write_palette": _wp}[name]

    if name in ("options_from_dict", "load_options", "build_from_options", "run"):
        from .orchestrator import (
            build_from_options as _bfo,
            load_options as _lo,
            options_from_dict as _ofd,
            run as _run,
        )

        return {
            "options_from_dict": _ofd,
            "load_options": _lo,
            "build_from_options": _bfo,
            "run": _run,
        }[name]

    raise AttributeError(name)


__all__ = [
    # types
    "ColorEntry",
    "Classification",
    # builder
    "build_palette",
    # output
    "render_palette",
    "write_palette",
    # orchestrator
    "options_from_dict",
    "load_options",
    "build_from_options",
    "run",
]

__docformat__ = "google"
