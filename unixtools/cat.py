"""Concatenate files to standard output."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

CANNOT_OPEN = "my-cat: cannot open file"


def cat_files(paths: Iterable[str], out: TextIO) -> None:
    """Write each file to ``out``, followed by a newline.

    Raises OSError when a file cannot be opened; earlier files have already
    been written by then.
    """
    for path in paths:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as source:
            for chunk in source:
                out.write(chunk)
        out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """Print the named files one after another."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        cat_files(args, sys.stdout)
    except OSError:
        print(CANNOT_OPEN)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())