from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from .errors import NotationError
from .notation import parse_tiles
from .rules import Ruleset
from .validator import check_set

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_MALFORMED = 2

_QUIT_WORDS = {"quit", "exit"}


def _verdict(text: str, ruleset: Ruleset, explain: bool) -> Tuple[str, int]:
    try:
        tiles = parse_tiles(text)
    except NotationError as exc:
        return f"Error: {exc}", EXIT_MALFORMED
    ok, reason = check_set(tiles, ruleset)
    if ok:
        return "Valid", EXIT_VALID
    if explain and reason:
        return f"Invalid: {reason}", EXIT_INVALID
    return "Invalid", EXIT_INVALID


def run_loop(stream: TextIO, ruleset: Ruleset, explain: bool = False, prompt: bool = False) -> int:
    """Check one sequence per input line until EOF or a quit word."""
    checked = 0
    while True:
        if prompt:
            print("> ", end="", flush=True)
        line = stream.readline()
        if not line:
            break
        text = line.strip()
        if not text:
            continue
        if text.lower() in _QUIT_WORDS:
            break
        message, _ = _verdict(text, ruleset, explain)
        print(message)
        checked += 1
    return checked


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check whether a sequence of Rummikub tiles forms a valid run or group.",
        epilog="Tiles: r/o/a/u + value (red, orange, black, blue), jokers j, d, m, c.",
    )
    parser.add_argument("tiles", nargs="*", help="Tiles to check, e.g. r5 r6 r7. Reads stdin when omitted.")
    parser.add_argument("--explain", action="store_true", help="Print why a sequence is invalid.")
    parser.add_argument(
        "--max-group-size",
        type=int,
        choices=(3, 4),
        default=Ruleset().max_group_size,
        help="Largest group allowed.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log validator decisions.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ruleset = Ruleset(max_group_size=args.max_group_size)

    if args.tiles:
        message, code = _verdict(" ".join(args.tiles), ruleset, args.explain)
        print(message)
        return code

    run_loop(sys.stdin, ruleset, explain=args.explain, prompt=sys.stdin.isatty())
    return EXIT_VALID


if __name__ == "__main__":
    sys.exit(main())
