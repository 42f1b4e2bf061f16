# color_code/codec/suggest.py
"""
suggest.py.

Does: Rank keyword names close to an unrecognized word ("did you mean").
Returns: Display names, best first.
Used By: CLI when a keyword fails to parse.
"""

from __future__ import annotations

import logging

from rapidfuzz import fuzz, process  # performant, no numpy dependency

from .keywords import keyword_names

__all__ = ["suggest_keywords", "DEFAULT_LIMIT", "DEFAULT_CUTOFF"]

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3
DEFAULT_CUTOFF = 75.0  # fuzz.ratio, 0–100


def suggest_keywords(
    word: str,
    limit: int = DEFAULT_LIMIT,
    score_cutoff: float = DEFAULT_CUTOFF,
) -> list[str]:
    """
    Does: Fuzzy-match ``word`` against the keyword table (case-insensitive).
    Returns: Up to ``limit`` display names scoring at least ``score_cutoff``;
             ties keep table order.
    """
    query = word.strip().lower()
    if not query or limit <= 0:
        return []
    names = keyword_names()
    choices = [n.strip().lower() for n in names]
    hits = process.extract(
        query,
        choices,
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    logger.debug("suggestions for %r: %s", word, hits)
    return [names[idx] for _choice, _score, idx in hits]
