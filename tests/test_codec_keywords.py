# tests/test_codec_keywords.py
from __future__ import annotations

import pytest
import webcolors

from color_code.codec import keywords as kw
from color_code.codec.types import MAX_HEX, NormalizedColor

"""
keyword table tests
===================

Does: Validate the static CSS keyword table, its case-insensitive lookups,
      the deterministic reverse lookup and the enumeration accessor.
"""


def test_table_size_and_hex_range():
    assert len(kw.KEYWORD_COLORS) == 141
    assert all(0 <= hx <= MAX_HEX for hx in kw.KEYWORD_COLORS.values())


def test_names_unique_case_insensitively():
    lowered = [n.lower() for n in kw.KEYWORD_COLORS]
    assert len(lowered) == len(set(lowered))


def test_table_is_read_only():
    with pytest.raises(TypeError):
        kw.KEYWORD_COLORS["Nope"] = 0x123456  # type: ignore[index]


def test_table_agrees_with_webcolors():
    for name, hx in kw.KEYWORD_COLORS.items():
        key = name.strip().lower()
        try:
            expected = webcolors.name_to_hex(key)
        except ValueError:
            # rebeccapurple is CSS4; older webcolors releases omit it from css3
            assert key == "rebeccapurple"
            continue
        assert expected == f"#{hx:06x}", name


@pytest.mark.parametrize("name", ["white", "WHITE", "White", "wHiTe"])
def test_hex_for_keyword_case_insensitive(name):
    assert kw.hex_for_keyword(name) == 0xFFFFFF


def test_hex_for_keyword_unknown_is_none():
    assert kw.hex_for_keyword("notacolor") is None


def test_trailing_space_names_are_kept_as_given():
    assert kw.hex_for_keyword("indigo") is None
    assert kw.hex_for_keyword("Indigo ") == 0x4B0082
    assert kw.keyword_for_hex(0x4B0082) == "Indigo "
    assert kw.keyword_for_hex(0xCD5C5C) == "IndianRed "


@pytest.mark.parametrize(
    "value,name",
    [
        (0x00FFFF, "Aqua"),  # also Cyan
        (0xFF00FF, "Fuchsia"),  # also Magenta
        (0x000000, "Black"),
        (0x6495ED, "CornflowerBlue"),
    ],
)
def test_keyword_for_hex_alphabetical_tie_break(value, name):
    assert kw.keyword_for_hex(value) == name


def test_keyword_for_hex_unnamed_is_none():
    assert kw.keyword_for_hex(0x123456) is None


def test_keyword_names_in_table_order():
    names = kw.keyword_names()
    assert names[0] == "Black"
    assert names[-1] == "Ivory"
    assert len(names) == len(kw.KEYWORD_COLORS)


def test_stylesheet_keyword_colors_enumeration():
    colors = kw.stylesheet_keyword_colors()
    assert len(colors) == 141
    assert colors["White"] == NormalizedColor(255, 255, 255, 1.0)
    assert colors["Cyan"] == colors["Aqua"]
    colors.pop("White")
    assert "White" in kw.stylesheet_keyword_colors()
