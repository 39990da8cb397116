"""Print the lines of a file in reverse order."""

from __future__ import annotations

import sys
from collections.abc import Iterable

USAGE = "usage: reverse <input> <output>"
SAME_FILE = "Input and output file must differ"


def reverse_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines last-first, each cut at its first newline."""
    return [line.split("\n", 1)[0] for line in lines][::-1]


def _open_text(path: str, mode: str):
    return open(path, mode, encoding="utf-8", errors="surrogateescape", newline="\n")


def main(argv: list[str] | None = None) -> int:
    """Reverse an input file (or stdin) into an output file (or stdout)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        sys.stderr.write(USAGE)
        return 1
    if len(args) == 2 and args[0] == args[1]:
        sys.stderr.write(SAME_FILE)
        return 1

    if args:
        try:
            with _open_text(args[0], "r") as source:
                lines = reverse_lines(source)
        except OSError:
            sys.stderr.write(f"error: cannot open file {args[0]}\n")
            return 1
    else:
        lines = reverse_lines(sys.stdin)

    text = "".join(f"{line}\n" for line in lines)
    if len(args) == 2:
        try:
            with _open_text(args[1], "w") as target:
                target.write(text)
        except OSError:
            sys.stderr.write(f"error: cannot open file {args[1]}\n")
            return 1
    else:
        sys.stdout.write(text)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())