"""
log.py.

Does: Lightweight debug logger controlled by PALETTE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the builder, resolver and CLI.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_all_topics"]

_ENV_VAR = "PALETTE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PALETTE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_all_topics() -> None:
    """Does: Turn every topic on for the rest of the process (CLI --debug)."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = {"all"}


def debug(
    msg: str,
    topic: str = "palette",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via PALETTE_DEBUG_TOPICS.
    """
    if not _DEBUG_TOPICS:
        return
    topic_key = topic.lower().strip()
    if "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS:
        if stream is None:
            stream = sys.stderr
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
