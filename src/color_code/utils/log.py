"""
log.py.

Does: Topic-filtered debug printer controlled by COLOR_CODE_DEBUG_TOPICS
      (comma-separated topics, or 'all'). Silent when the variable is unset.
Returns: Prints timestamped lines with topic + level to stderr.
Used by: Config loading and the colorcode CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable_topics", "reload_topics", "ENV_VAR"]

ENV_VAR = "COLOR_CODE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable COLOR_CODE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Switch topics on for this process (e.g. from a --debug flag)."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def debug(
    msg: str,
    topic: str = "codec",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line if the topic is enabled."""
    topic_key = topic.lower().strip()
    if "all" not in _DEBUG_TOPICS and topic_key not in _DEBUG_TOPICS:
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
