"""Command-line entry point: load the game library and print a summary."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from bolognaise.library import Library
from bolognaise.parser import ParseError

DEFAULT_DATA_PATH = "./data/"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the library from the data directory and print its summary."""
    arg_parser = argparse.ArgumentParser(
        prog="bolognaise", description="Load the game library and summarise it."
    )
    arg_parser.add_argument(
        "data_path",
        nargs="?",
        default=DEFAULT_DATA_PATH,
        help=f"directory holding items.txt (default: {DEFAULT_DATA_PATH})",
    )
    args = arg_parser.parse_args(argv)

    try:
        library = Library.load(args.data_path)
    except (OSError, ParseError) as err:
        print(f"Failed to load game library: {err}")
        return 1

    print(library.info())
    return 0


if __name__ == "__main__":
    sys.exit(main())