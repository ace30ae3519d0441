from __future__ import annotations

import argparse
import json
import logging
import sys

from conterm.pretty import Markup

from cssjss import __version__, css_to_jss, jss_to_css
from cssjss.css import Lexer, ParseError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the `css2jss` and `jss2css` commands."""
    parser = argparse.ArgumentParser(
        prog="cssjss",
        description="Convert between CSS and JSS style objects",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_jss = subparsers.add_parser("css2jss", help="Convert CSS into a makeStyles module")
    to_jss.add_argument("file", nargs="?", help="CSS file to read (default: stdin)")
    to_jss.add_argument("-u", "--unit", default=None, help="Unit to strip from single values, e.g. px")
    to_jss.add_argument("--dashes", action="store_true", help="Keep property names dashed")
    to_jss.add_argument("--strict", action="store_true", help="Fail on malformed CSS")
    to_jss.add_argument("--bare", action="store_true", help="Print only the style object")
    to_jss.add_argument("-o", "--output", default=None, help="File to write (default: stdout)")

    to_css = subparsers.add_parser("jss2css", help="Convert a JSON style object into CSS")
    to_css.add_argument("file", nargs="?", help="JSON file to read (default: stdin)")
    to_css.add_argument("-o", "--output", default=None, help="File to write (default: stdout)")

    return parser


def _status_(color: str, label: str, message: str) -> str:
    return f"{Markup.parse(f'[{color}]{label}', mar=False)}\x1b[0m {message}"


def _read_(path: str | None, css: bool) -> str:
    if path is None:
        return sys.stdin.read()
    if css:
        return Lexer.get_css(path)
    with open(path, "r", encoding="utf-8") as file:
        return file.read()


def _write_(path: str | None, content: str):
    if path is None:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as file:
        file.write(content)
    logger.info("Wrote %s", path)


def run(args: argparse.Namespace) -> int:
    if args.command == "css2jss":
        result = css_to_jss.convert({
            "code": _read_(args.file, css=True),
            "unit": args.unit,
            "dashes": args.dashes,
            "strict": args.strict,
            "wrap": not args.bare,
        })
    else:
        result = jss_to_css.convert(json.loads(_read_(args.file, css=False)))
    _write_(args.output, result)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    try:
        return run(args)
    except (ParseError, json.JSONDecodeError, OSError) as error:
        print(_status_("red", "error:", str(error)), file=sys.stderr)
        return 1
