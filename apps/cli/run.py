# apps/cli/run.py
"""
CLI entry point for findword.

This script:
  1) Parses the shelf, and either one pattern (-p) or a list of patterns read
     from stdin (-i, terminated by a line reading 'eof').
  2) Loads the dictionary (optionally printing a validation summary).
  3) Runs the search pipeline and prints one "<score>\\t<word>" line per
     feasible match.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List

from findword.datasets import DEFAULT_DICTIONARY, load_dictionary, validate_dictionary, pretty_summary
from findword.engine import FindWordError, MissingRequiredOptionError
from findword.harness import find_words

log = logging.getLogger("findword")

EOF_MARKER = "eof"

EPILOG = f"""\
Pattern characters:
  a-z   a tile already on the board
  .     a slot you fill from your shelf (only letters you hold)
  _     any single letter
Letters you hold may also extend the word past the end of the pattern.
Use _ on the shelf for a wildcard tile.

Examples:
  findword -s tkbdwne -p art words.txt
  findword -s tkbdwn_ -i < patterns.txt

With -i, enter one pattern per line and finish the list with '{EOF_MARKER}'
on its own line. -i cannot be used with -p.
"""


def read_patterns(stream: Iterable[str]) -> List[str]:
    """
    Collect patterns one per line until a line exactly equal to 'eof'
    (or end of input).
    """
    patterns: List[str] = []
    for line in stream:
        p = line.rstrip("\r\n")
        if p == EOF_MARKER:
            break
        patterns.append(p)
    return patterns


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="findword",
        description="Find words that fit a board pattern with the tiles on your shelf, "
                    "scored by letter values.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("-s", "--shelf", help="the letters you currently have available; required")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-p", "--pattern",
                      help="board pattern to match against; required unless -i is used")
    mode.add_argument("-i", "--interactive", action="store_true",
                      help=f"read a list of patterns from stdin, ended by '{EOF_MARKER}'")
    ap.add_argument("dictionary", nargs="?", default=DEFAULT_DICTIONARY,
                    help=f"word list, one lowercase word per line (default: {DEFAULT_DICTIONARY})")
    ap.add_argument("--sort", action="store_true",
                    help="order results by highest score (default: dictionary order)")
    ap.add_argument("--validate", action="store_true",
                    help="print a dictionary validation summary before searching")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="off",
        help="Show scan progress on stderr (auto=bar only when stderr is a terminal)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug-level logging")
    return ap


def _check_required(args: argparse.Namespace) -> None:
    if not args.shelf:
        raise MissingRequiredOptionError("Please specify a shelf")
    if not args.pattern and not args.interactive:
        raise MissingRequiredOptionError("Please specify a pattern")


def main(argv: List[str] | None = None) -> None:
    """
    Parse CLI args, load the dictionary, run the search and print results.
    Exits with status 2 on usage errors and 1 on any other failure.
    """
    ap = _build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        _check_required(args)
    except MissingRequiredOptionError as e:
        ap.error(str(e))

    progress = args.progress
    if progress == "auto":
        progress = "bar" if sys.stderr.isatty() else "off"

    try:
        # 1) Dictionary first, so a bad path fails before we wait on stdin
        if args.validate:
            print(pretty_summary(validate_dictionary(args.dictionary)), file=sys.stderr)
        words = load_dictionary(args.dictionary)

        # 2) Patterns
        patterns = read_patterns(sys.stdin) if args.interactive else [args.pattern]

        # 3) Search
        results = find_words(args.shelf, patterns, words,
                             sort=args.sort, progress=progress == "bar")
    except FindWordError as e:
        log.error("%s", e)
        raise SystemExit(1)

    for r in results:
        print(r)


if __name__ == "__main__":
    main()
