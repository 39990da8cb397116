"""Print lines that contain a search term."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

USAGE = "my-grep: searchterm [file ...]\n"
CANNOT_OPEN = "cannot Open File"


def matching_lines(lines: Iterable[str], term: str) -> Iterator[str]:
    """Yield the lines that contain ``term``."""
    return (line for line in lines if term in line)


def _until_blank(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield line
        if line == "\n":
            return


def grep_stream(stream: Iterable[str], term: str, out: TextIO, stop_on_blank: bool) -> int:
    """Write matching lines of ``stream`` to ``out``; return how many were written.

    With ``stop_on_blank`` reading ends after an empty line, which is itself
    still matched first.
    """
    lines = _until_blank(stream) if stop_on_blank else stream
    count = 0
    for line in matching_lines(lines, term):
        out.write(line)
        count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    """Search files, or standard input when none are named."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(USAGE)
        return 1
    term, paths = args[0], args[1:]
    if not paths:
        grep_stream(sys.stdin, term, sys.stdout, True)
        return 0
    for path in paths:
        try:
            source = open(path, encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            print(CANNOT_OPEN)
            return 1
        with source:
            grep_stream(source, term, sys.stdout, False)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())