#!/usr/bin/env python3
"""
Prefix Dictionary

Loads a word list into a prefix trie and answers exact-word, prefix and
prefix-listing queries, either as a fixed demonstration run or from an
interactive prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys

from prefixdict.cli import run_demo, run_interactive
from prefixdict.dictionary import Dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("prefixdict")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Prefix Dictionary -- trie-backed word and prefix lookups",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dataset / word list file")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Query the dictionary from a prompt instead of running the demo")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not echo every inserted word")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dictionary = Dictionary(args.dict)
    if not dictionary.words:
        print("No words were read from the file.")
        return 1

    if args.interactive:
        run_interactive(dictionary)
    else:
        run_demo(dictionary.words, echo_inserts=not args.quiet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
