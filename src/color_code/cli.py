# src/color_code/cli.py
import argparse
import json
import logging
import sys

from .codec import (
    ColorCodeType,
    convert,
    format_all,
    format_color,
    parse_many,
    stylesheet_keyword_colors,
    suggest_keywords,
)
from .config import get_settings
from .errors import ColorCodeError
from .utils import ConfigTypeError, debug, enable_topics, reload_topics


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorcode",
        description="Parse CSS3 color codes and convert them between hex, rgb(a), hsl(a) and keywords.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Report type, channels and every representation")
    p_parse.add_argument("codes", nargs="+", help="Color codes (e.g. '#ff0000' 'hsl(0,100%%,50%%)')")

    p_convert = sub.add_parser("convert", help="Re-render a color code in another family")
    p_convert.add_argument("code", help="Color code to convert")
    p_convert.add_argument(
        "--to",
        dest="to",
        default=None,
        help="Target family: " + ", ".join(t for t in ColorCodeType.tags() if t != "invalid"),
    )

    sub.add_parser("keywords", help="List every keyword color as #rrggbb")
    return parser


def _report(results) -> list[dict]:
    out = []
    for code, result in results:
        entry: dict = {"code": code, "type": result.code_type.value}
        if result.color is not None:
            c = result.color
            entry["rgba"] = [c.red, c.green, c.blue, c.alpha]
            entry["formats"] = {t.value: s for t, s in format_all(c).items()}
        out.append(entry)
    return out


def _cmd_parse(args) -> int:
    results = parse_many(args.codes, debug=args.debug)
    print(json.dumps(_report(zip(args.codes, results)), indent=2, ensure_ascii=False))
    return 0 if all(results) else 1


def _cmd_convert(args, settings) -> int:
    target = ColorCodeType.from_tag(args.to) if args.to else settings.default_format
    out = convert(args.code, target, debug=args.debug)
    if out is not None:
        print(out)
        return 0

    word = args.code.strip()
    hints = suggest_keywords(word, settings.suggestion_limit, settings.suggestion_cutoff) if word.isalpha() else []
    if hints:
        print(f"Unknown color {word!r}. Did you mean: {', '.join(h.strip() for h in hints)}?", file=sys.stderr)
    else:
        print(f"Cannot represent {args.code!r} as {target.value}", file=sys.stderr)
    return 1


def _cmd_keywords() -> int:
    listing = {
        name.strip(): format_color(color, ColorCodeType.HEX)
        for name, color in stylesheet_keyword_colors().items()
    }
    print(json.dumps(listing, indent=2))
    return 0


def main(argv=None) -> int:
    """CLI: parse color codes, convert between families, list keyword colors."""
    args = _build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        enable_topics("cli", "config")
    debug(f"command={args.command}", topic="cli")

    try:
        if args.command == "parse":
            return _cmd_parse(args)
        if args.command == "convert":
            return _cmd_convert(args, get_settings())
        return _cmd_keywords()
    except (ColorCodeError, ConfigTypeError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        # --debug topics last for this invocation only
        reload_topics()


if __name__ == "__main__":
    sys.exit(main())
