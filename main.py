#!/usr/bin/env python3
"""
Latvian Number Words: Entry Point
=================================

Prints the Latvian words for each number given on the command line.

Usage:
    python main.py                      # Demo set
    python main.py 42 -1500000 123.45   # Your own numbers
    LV_NUMWORDS_LOG_LEVEL=DEBUG python main.py 5.1
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from lv_numwords.converter import describe
from lv_numwords.exceptions import NumberConversionError
from lv_numwords.models import ConversionKind

load_dotenv()


DEMO_NUMBERS = [
    "0",
    "21",
    "345",
    "1000000000000",
    "-1500000",
    "123.45",
    "5.1",
    "9223372036854775807",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversions(numbers: list[str]) -> int:
    """Convert and print each number.

    Returns:
        0 if every number converted, 1 if any was rejected.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  LATVIAN NUMBER WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for raw in numbers:
        try:
            conversion = describe(raw)
        except NumberConversionError as exc:
            failures += 1
            print(f"  {_RED}{raw:>22}  [{exc.code}] {exc}{_RESET}")
            continue

        marker = "€" if conversion.kind == ConversionKind.CURRENCY else " "
        print(f"  {conversion.number:>22} {_DIM}{marker}{_RESET} {_GREEN}{conversion.words}{_RESET}")

    print(f"{'=' * _WIDTH}\n")
    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert the numbers given as arguments, or the demo set."""
    logging.basicConfig(level=os.getenv("LV_NUMWORDS_LOG_LEVEL", "WARNING").upper())
    args = sys.argv[1:] if argv is None else argv
    return print_conversions(args or DEMO_NUMBERS)


if __name__ == "__main__":
    sys.exit(main())
