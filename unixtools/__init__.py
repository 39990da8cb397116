"""Small Unix-style command-line tools: reverse, cat, grep, run-length zip/unzip and a minimal shell."""

__version__ = "0.1.0"
__all__ = ["reverse", "cat", "grep", "rle", "wish"]