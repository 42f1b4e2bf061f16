# tests/test_codec_suggest.py
from __future__ import annotations

import pytest

from color_code.codec.suggest import suggest_keywords

"""
suggestion tests
================

Does: Check fuzzy "did you mean" ranking, cutoffs and limits against the
      real keyword table (rapidfuzz ratio scorer).
"""


def test_close_typo_ranks_target_first():
    assert suggest_keywords("cornflowerblu")[0] == "CornflowerBlue"


def test_case_insensitive_query():
    assert suggest_keywords("CORNFLOWERBLU")[0] == "CornflowerBlue"


def test_display_names_keep_trailing_space():
    assert "Indigo " in suggest_keywords("indgo")


def test_typo_includes_white():
    assert "White" in suggest_keywords("whte")


@pytest.mark.parametrize("word", ["", "   ", "zzzzqqqxx"])
def test_no_suggestions(word):
    assert suggest_keywords(word) == []


def test_limit_respected():
    assert len(suggest_keywords("darkblue", limit=2, score_cutoff=0)) == 2
    assert suggest_keywords("darkblue", limit=0) == []


def test_cutoff_filters_weak_matches():
    loose = suggest_keywords("blu", limit=10, score_cutoff=50)
    strict = suggest_keywords("blu", limit=10, score_cutoff=99)
    assert "Blue" in loose
    assert strict == []
