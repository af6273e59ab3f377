"""Command-line arguments and flags."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(allow_abbrev=False)
    parser.add_argument("-name", "--name", default="John Doe", help="Your name")
    parser.add_argument("-age", "--age", type=int, default=30, help="Your age")
    parser.add_argument(
        "-isMale", "--isMale", dest="is_male", action="store_true", help="Your gender"
    )
    parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the name, age and isMale flags; exit with status 2 on bad input."""
    return _parser().parse_args(list(argv) if argv is not None else sys.argv[1:])


def main(argv: Sequence[str] | None = None) -> int:
    """Print every argument, then the parsed flags."""
    args = list(argv) if argv is not None else sys.argv[1:]
    for index, arg in enumerate([sys.argv[0], *args]):
        print(f"Argument {index}: {arg}")
    options = parse_args(args)
    print(f"Name: {options.name}")
    print(f"Age: {options.age}")
    print(f"Is Male: {'true' if options.is_male else 'false'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())