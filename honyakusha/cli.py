"""Command-line interface."""

from __future__ import annotations

import argparse
import os
import sys

from .conf import ConfError, load
from .debug import enable_debug_mode
from .trans import format_result, translate
from .version import get_version

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="honyakusha",
        description="Translate text using a variety of translation services",
    )
    commands = parser.add_subparsers(dest="command")

    trans = commands.add_parser("trans", help="Translate text via translation services")
    trans.add_argument("text", nargs="*", metavar="TEXT")
    trans.add_argument("--source", default="", help="language of the text to be translated")
    trans.add_argument(
        "--target", default="", help="the language into which the text should be translated"
    )
    trans.add_argument("-f", "--format", default="plain", help="choose an output formatter")
    trans.add_argument(
        "--translator",
        action="append",
        default=[],
        help="use one or more specified translation services",
    )

    commands.add_parser("version", help="Display version information")
    return parser


def _run_trans(args: argparse.Namespace) -> int:
    text = " ".join(args.text)
    if not text:
        print("missing args: requires TEXT", file=sys.stderr)
        return 1

    specified = [name for value in args.translator for name in value.split(",") if name]
    try:
        conf = load()
    except ConfError as exc:
        print(exc, file=sys.stderr)
        return 1

    res = translate(text, args.source, args.target, specified, conf)
    print(format_result(res, args.format), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    if os.environ.get("DEBUG"):
        enable_debug_mode()

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "trans":
        return _run_trans(args)
    if args.command == "version":
        print(get_version().info(), end="")
        return 0
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())