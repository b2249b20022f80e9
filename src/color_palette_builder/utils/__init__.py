# src/color_palette_builder/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the palette stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Orchestrator, source adapters, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigResolveError,
    ConfigTypeError,
    clear_config_cache,
    load_config,
    load_json_file,
    resolve_base_dir,
)
from .log import (
    debug,
    enable_all_topics,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "load_json_file",
    "clear_config_cache",
    "resolve_base_dir",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "ConfigResolveError",
    # Logging helpers
    "debug",
    "enable_all_topics",
    "reload_topics",
]
