"""
Query GitHub Linguist's language colors for terminal use.

    $ linguist-termcolor for rust
    rgb #dea584 xterm 180 Rust

Names, aliases (``golang``, ``js``) and file extensions (``.rs``) are
accepted. ``xterm`` finds the nearest xterm colors for hex colors:

    $ linguist-termcolor xterm 3572a5
    rgb #3572a5 xterm 61
"""

import argparse
import sys

from linguist_table import NotFoundError, default_table
from term_style import MODES, format_color, format_result, select_renderer
from xterm_palette import parse_hex

__version__ = "0.1.0"


class InvalidArgumentsError(ValueError):
    """Malformed command line."""

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.usage = usage


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise InvalidArgumentsError(message, usage=self.format_usage())


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="linguist-termcolor",
        description="Print GitHub Linguist language colors as hex and xterm-256 colors",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--color",
        choices=MODES,
        default="auto",
        help="How to style the output (default: auto)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    lang = commands.add_parser("for", help="Query GitHub Linguist's language colors")
    lang.add_argument("query", nargs="+", help="Language name, alias or file extension")

    xterm = commands.add_parser(
        "xterm", help="Find nearest xterm colors for colors given in hex notation"
    )
    xterm.add_argument("colors", nargs="+", help="Colors such as #dea584 or 3572a5")
    return parser


def linguist(query, renderer):
    """Output lines for a language query; raises NotFoundError."""
    text = " ".join(query).strip()
    if not text:
        raise InvalidArgumentsError("language name must not be empty")
    return [format_result(result, renderer) for result in default_table().find(text)]


def xterm(colors, renderer):
    lines = []
    for color in colors:
        try:
            rgb = parse_hex(color)
        except ValueError as e:
            raise InvalidArgumentsError(str(e)) from e
        lines.append(format_color(rgb, renderer))
    return lines


def main(argv=None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        renderer = select_renderer(args.color, sys.stdout)
        if args.command == "for":
            lines = linguist(args.query, renderer)
        else:
            lines = xterm(args.colors, renderer)
    except InvalidArgumentsError as e:
        print(e.usage or parser.format_usage(), end="", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except NotFoundError as e:
        print(f"Error: no color found for language {e.query!r}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
