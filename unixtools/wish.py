"""A small shell with built-in cd, path and exit, redirection and parallel commands."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

ERROR_MESSAGE = "An error has occurred\n"
PROMPT = "wish> "
MAX_PARALLEL = 64
MAX_ARGS = 1023


@dataclass(frozen=True)
class Command:
    """One command's words, with a trailing ``> file`` read as redirection."""

    words: tuple[str, ...]

    @property
    def name(self) -> str:
        return self.words[0]

    @property
    def output(self) -> str | None:
        if len(self.words) >= 3 and self.words[-2] == ">":
            return self.words[-1]
        return None

    @property
    def args(self) -> tuple[str, ...]:
        return self.words[:-2] if self.output is not None else self.words


def split_parallel(line: str) -> list[str]:
    """Split a line at '&' into trimmed, non-empty commands (at most 64)."""
    parts = (part.strip(" ") for part in line.split("&"))
    return [part for part in parts if part][:MAX_PARALLEL]


def parse_command(text: str) -> Command | None:
    """Split a command at spaces; return None when it has no words."""
    words = tuple(word for word in text.split(" ") if word)[:MAX_ARGS]
    return Command(words) if words else None


class Shell:
    """Runs command lines, keeping the search path between them."""

    def __init__(self, stderr: TextIO | None = None):
        self._stderr = stderr
        self.paths: list[str] = ["/bin"]
        self._builtins = {"cd": self._cd, "exit": self._exit, "path": self._path}

    def _error(self) -> None:
        stream = self._stderr if self._stderr is not None else sys.stderr
        stream.write(ERROR_MESSAGE)
        stream.flush()

    def _cd(self, words: tuple[str, ...]) -> bool:
        if len(words) != 2:
            self._error()
            return True
        try:
            os.chdir(words[1])
        except OSError:
            self._error()
        return True

    def _exit(self, words: tuple[str, ...]) -> bool:
        if len(words) != 1:
            self._error()
            return True
        return False

    def _path(self, words: tuple[str, ...]) -> bool:
        self.paths = list(words[1:])
        return True

    def find_executable(self, name: str) -> str | None:
        """Return the first executable ``path/name`` on the search path."""
        for directory in self.paths:
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
        return None

    def _launch(self, command: Command) -> subprocess.Popen | None:
        executable = self.find_executable(command.name)
        if executable is None:
            self._error()
            return None
        args = list(command.args)
        target = command.output
        try:
            if target is None:
                return subprocess.Popen(args, executable=executable)
            with open(target, "wb") as sink:
                return subprocess.Popen(
                    args, executable=executable, stdout=sink, stderr=sink
                )
        except OSError:
            self._error()
            return None

    def run_line(self, line: str) -> bool:
        """Run one input line; return False when the shell should exit."""
        texts = split_parallel(line.split("\n", 1)[0])
        parallel = len(texts) > 1
        children: list[subprocess.Popen] = []
        try:
            for text in texts:
                command = parse_command(text)
                if command is None:
                    continue
                builtin = self._builtins.get(command.name)
                if builtin is not None:
                    if parallel:
                        self._error()
                    elif not builtin(command.words):
                        return False
                    continue
                child = self._launch(command)
                if child is not None:
                    children.append(child)
        finally:
            for child in children:
                child.wait()
        return True

    def run(self, stream: Iterable[str] | TextIO, interactive: bool) -> int:
        """Read and run lines until end of input or ``exit``."""
        lines = iter(stream)
        while True:
            if interactive:
                sys.stdout.write(PROMPT)
                sys.stdout.flush()
            line = next(lines, None)
            if line is None:
                break
            if not self.run_line(line):
                break
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the shell interactively, or in batch mode on a script file."""
    args = sys.argv[1:] if argv is None else list(argv)
    shell = Shell()
    if len(args) > 1:
        shell._error()
        return 1
    if args:
        try:
            script = open(args[0], encoding="utf-8", errors="surrogateescape")
        except OSError:
            shell._error()
            return 1
        with script:
            return shell.run(script, False)
    return shell.run(sys.stdin, True)


if __name__ == "__main__":
    sys.exit(main())