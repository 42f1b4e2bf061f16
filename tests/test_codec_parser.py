# tests/test_codec_parser.py
from __future__ import annotations

import logging

import pytest

from color_code.codec import parser as P
from color_code.codec.types import ColorCodeType as T
from color_code.codec.types import NormalizedColor, ParseResult

"""
parser tests
============

Does: Cover family classification, numeric extraction per family, keyword
      lookup, whitespace handling and the INVALID outcomes.
"""


# ── Hex families ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "code,rgb",
    [
        ("#000000", (0, 0, 0)),
        ("#ffffff", (255, 255, 255)),
        ("#FFAABB", (255, 170, 187)),
        ("#1a2B3c", (0x1A, 0x2B, 0x3C)),
    ],
)
def test_hex(code, rgb):
    assert P.parse(code) == ParseResult(T.HEX, NormalizedColor(*rgb, 1.0))


@pytest.mark.parametrize(
    "code,rgb",
    [
        ("#f00", (255, 0, 0)),
        ("#abc", (170, 187, 204)),
        ("#000", (0, 0, 0)),
        ("#FFF", (255, 255, 255)),
        ("#123", (17, 34, 51)),
    ],
)
def test_short_hex_scales_nibbles(code, rgb):
    assert P.parse(code) == ParseResult(T.SHORT_HEX, NormalizedColor(*rgb))


# ── rgb / rgba ───────────────────────────────────────────────────────────────
def test_rgb_basic():
    res = P.parse("rgb(255,0,0)")
    assert res.code_type is T.CSS_RGB
    assert res.color == NormalizedColor(255, 0, 0, 1.0)


def test_rgb_whitespace_is_insignificant():
    assert P.parse(" rgb( 10 , 20 , 30 ) ") == P.parse("rgb(10,20,30)")
    assert P.parse("rgb(10,20,30)").color == NormalizedColor(10, 20, 30)


def test_rgb_out_of_range_channels_pass_through():
    assert P.parse("rgb(300,0,999)").color == NormalizedColor(300, 0, 999)


@pytest.mark.parametrize(
    "code,alpha",
    [
        ("rgba(1,2,3,0.25)", 0.25),
        ("rgba(1,2,3,1)", 1.0),
        ("rgba(1,2,3,0)", 0.0),
        ("rgba(1,2,3,.5)", 0.5),
        ("rgba(1,2,3,2)", 2.0),  # not clamped
        ("rgba(1,2,3,1.2.3)", 1.0),  # unparseable -> default
        ("rgba(1,2,3,.)", 1.0),
    ],
)
def test_rgba_alpha(code, alpha):
    res = P.parse(code)
    assert res.code_type is T.CSS_RGBA
    assert res.color == NormalizedColor(1, 2, 3, alpha)


# ── hsl / hsla ───────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "code,rgb",
    [
        ("hsl(0,100%,50%)", (255, 0, 0)),
        ("hsl(120,100%,50%)", (0, 255, 0)),
        ("hsl(240,100%,50%)", (0, 0, 255)),
        ("hsl(360,100%,50%)", (255, 0, 0)),  # hue wraps
        ("hsl(0,0%,100%)", (255, 255, 255)),
        ("hsl(0,0%,0%)", (0, 0, 0)),
        ("hsl(0,0%,50%)", (128, 128, 128)),  # 127.5 rounds away from zero
        ("hsl(210,50%,40%)", (51, 102, 153)),
        ("hsl(0,150%,50%)", (255, 0, 0)),  # saturation clamped
        ("hsl(0,1.2.3%,50%)", (128, 128, 128)),  # bad saturation -> 0
    ],
)
def test_hsl(code, rgb):
    assert P.parse(code) == ParseResult(T.CSS_HSL, NormalizedColor(*rgb))


def test_hsla_white_half_alpha():
    res = P.parse("hsla(0,0%,100%,0.5)")
    assert res.code_type is T.CSS_HSLA
    assert res.color == NormalizedColor(255, 255, 255, 0.5)


def test_hsl_whitespace():
    assert P.parse("hsl( 120 , 100% , 50% )") == P.parse("hsl(120,100%,50%)")


# ── Keywords ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("code", ["WHITE", "White", "white", "  white\n"])
def test_keyword_case_insensitive(code):
    assert P.parse(code) == ParseResult(T.CSS_KEYWORD, NormalizedColor(255, 255, 255, 1.0))


def test_keyword_cornflowerblue():
    assert P.parse("cornflowerblue").color == NormalizedColor(0x64, 0x95, 0xED)


def test_unknown_keyword_is_reclassified_invalid():
    assert P.parse("notacolor") == ParseResult(T.INVALID, None)


def test_trailing_space_keyword_cannot_parse():
    assert P.parse("Indigo").code_type is T.INVALID


# ── Invalid input ────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "code",
    [
        "",
        "   ",
        "#ff",
        "#ffff",
        "#fffffff",
        "#ggg",
        "# fff",
        "ff0000",
        "rgb(1,2)",
        "rgb(1,2,3,4)",
        "rgb(1000,0,0)",
        "rgb (1,2,3)",
        "RGB(1,2,3)",
        "rgb(-1,2,3)",
        "rgba(1,2,3)",
        "hsl(0,50,50)",
        "hsl(0,50 %,50%)",
        "hsl(0.5,50%,50%)",
        "hsla(0,50%,50%)",
        "red1",
        "light-blue",
        "dark blue",
        "#fff #000",
    ],
)
def test_malformed_is_invalid(code):
    res = P.parse(code)
    assert res.code_type is T.INVALID
    assert res.color is None
    assert not res


def test_surrounding_whitespace_trimmed():
    assert P.parse("\t#fff \n").code_type is T.SHORT_HEX


# ── Helpers ──────────────────────────────────────────────────────────────────
def test_parse_many_keeps_order():
    out = P.parse_many(["#fff", "nope", "rgb(1,2,3)"])
    assert [r.code_type for r in out] == [T.SHORT_HEX, T.INVALID, T.CSS_RGB]


@pytest.mark.parametrize(
    "code,expect",
    [
        ("#ffffff", T.HEX),
        ("#fff", T.SHORT_HEX),
        ("rgb(0,0,0)", T.CSS_RGB),
        ("rgba(0,0,0,1)", T.CSS_RGBA),
        ("hsl(0,0%,0%)", T.CSS_HSL),
        ("hsla(0,0%,0%,1)", T.CSS_HSLA),
        ("black", T.CSS_KEYWORD),
        ("blackish", T.INVALID),
    ],
)
def test_detect_code_type(code, expect):
    assert P.detect_code_type(code) is expect


def test_classify_requires_single_family(monkeypatch):
    # Two grammars accepting the same text make the input ambiguous.
    extra = (T.HEX, P.re.compile(r"[a-zA-Z]+"))
    monkeypatch.setattr(P, "_GRAMMARS", P._GRAMMARS + (extra,), raising=True)
    assert P.parse("white").code_type is T.INVALID


def test_debug_traces_through_module_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="color_code.codec.parser"):
        P.parse("notacolor", debug=True)
        P.parse("#fff", debug=True)
    assert "UNKNOWN cssKeyword" in caplog.text
    assert "[shortHex]" in caplog.text


def test_no_trace_without_debug_flag(caplog):
    with caplog.at_level(logging.DEBUG, logger="color_code.codec.parser"):
        P.parse("notacolor")
    assert caplog.text == ""


@pytest.mark.parametrize("raw", [None, "", "x"])
def test_int_field_falls_back_to_zero(raw):
    assert P._to_int(raw) == 0
