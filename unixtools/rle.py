"""Run-length encoding with 4-byte counts, as used by the zip and unzip commands."""

from __future__ import annotations

import struct
import sys
from itertools import groupby

_RECORD = struct.Struct("<iB")

USAGE = "my-unzip: file1 [file2 ...]"
ZIP_CANNOT_OPEN = "my-zip: cannot open file"
UNZIP_CANNOT_OPEN = "my-unzip: cannot open file"


def compress(data: bytes) -> bytes:
    """Encode each run as a little-endian 32-bit count followed by the byte."""
    return b"".join(
        _RECORD.pack(sum(1 for _ in run), value) for value, run in groupby(data)
    )


def decompress(data: bytes) -> bytes:
    """Expand records made by :func:`compress`.

    Raises ValueError if the data does not hold whole records.
    """
    if len(data) % _RECORD.size:
        raise ValueError("truncated run-length record")
    return b"".join(
        bytes([value]) * max(count, 0) for count, value in _RECORD.iter_unpack(data)
    )


def _write_binary(payload: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()


def _run(argv: list[str] | None, transform, cannot_open: str) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE)
        return 1
    for path in args:
        try:
            with open(path, "rb") as source:
                data = source.read()
        except OSError:
            print(cannot_open)
            return 1
        _write_binary(transform(data))
    return 0


def zip_main(argv: list[str] | None = None) -> int:
    """Compress each named file to standard output."""
    return _run(argv, compress, ZIP_CANNOT_OPEN)


def unzip_main(argv: list[str] | None = None) -> int:
    """Decompress each named file to standard output."""
    return _run(argv, decompress, UNZIP_CANNOT_OPEN)


if __name__ == "__main__":
    sys.exit(zip_main())