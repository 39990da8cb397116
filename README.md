# unixtools

A set of small Unix-style command-line tools and a minimal shell. The
package uses only the standard library.

## Installation

```
pip install .
```

## Commands

### reverse

Prints the lines of its input in reverse order. Each line is written
back with a trailing newline.

```
reverse                 # read stdin, write stdout
reverse input.txt       # read a file, write stdout
reverse input.txt out   # read a file, write another file
```

- With more than two arguments, it prints `usage: reverse <input> <output>`
  on stderr and exits with status 1.
- If the input and output arguments are the same path string, it prints
  `Input and output file must differ` and exits with status 1.
- If a file cannot be opened, it prints `error: cannot open file <name>`
  and exits with status 1.

### my-cat

Writes each named file to stdout and adds a newline after each one. If
you give no files, it prints nothing and exits with status 0. If a file
cannot be opened, it prints `my-cat: cannot open file` on stdout and
exits with status 1. Files that came before it have already been
printed.

```
my-cat a.txt b.txt
```

### my-grep

Prints the lines that contain a search term. The match is a plain,
case-sensitive substring match.

```
my-grep term file1 file2
my-grep term            # read stdin until an empty line
```

- With no arguments, it prints `my-grep: searchterm [file ...]` on stderr
  and exits with status 1.
- With files, it prints a newline after the matches of each file. If a
  file cannot be opened, it prints `cannot Open File` and exits with
  status 1.
- On stdin, reading stops after the first empty line.

### my-zip / my-unzip

Run-length encoding. Each run is stored as a 4-byte little-endian signed
count followed by the byte itself. `my-zip` writes the encoded form of
each file you give it to stdout. `my-unzip` decodes such files to stdout.

```
my-zip big.txt > big.z
my-unzip big.z
```

If you give no files, both commands print `my-unzip: file1 [file2 ...]`
and exit with status 1. If a file cannot be opened, they print
`my-zip: cannot open file` or `my-unzip: cannot open file` and exit with
status 1.

### wish

A minimal shell:

- Built-in commands:
  - `cd DIR` takes exactly one argument.
  - `path [DIR ...]` replaces the search path. With no directories, the
    search path is empty.
  - `exit` takes no arguments.
- `cmd args > file` sends the command's stdout and stderr to `file`.
- `cmd1 & cmd2` runs commands in parallel. The shell waits for all of
  them before it reads the next line. A built-in command in a parallel
  line is an error.

External programs are looked up only in the search-path directories. The
default search path is `/bin`.

```
wish              # interactive, shows the "wish> " prompt
wish batch.txt    # run the commands in a file, without a prompt
```

Every error prints `An error has occurred` on stderr. If you pass more
than one argument, or the batch file cannot be opened, the shell exits
with status 1.

## Library use

```python
from unixtools.reverse import reverse_lines
from unixtools.grep import matching_lines
from unixtools.rle import compress, decompress
from unixtools.wish import Shell, parse_command, split_parallel

assert decompress(compress(b"aaabccc")) == b"aaabccc"
print(reverse_lines(["one", "two"]))                   # ['two', 'one']
print(list(matching_lines(["cat\n", "dog\n"], "do")))  # ['dog\n']
print(split_parallel("ls & echo hi"))                  # ['ls', 'echo hi']
print(parse_command("echo hi > out").output)           # 'out'
```

The modules provide the following:

- `cat.cat_files(paths, out)` raises `OSError` when a file cannot be
  opened.
- `grep.grep_stream(stream, term, out, stop_on_blank)` returns the
  number of lines it wrote.
- `rle.decompress` raises `ValueError` when the data does not hold
  whole 5-byte records. `my-unzip` does not catch that error.
- `Shell.run_line(line)` returns `False` when the shell should exit.
- `Shell.find_executable(name)` returns the first executable
  `dir/name` on the search path, or `None`.

## What it does not do

The shell is deliberately small. It has no pipes, no quoting or
escaping, no globbing, no variables, no input redirection and no job
control. Words are split on spaces only. Only a trailing `> file` is
treated as redirection.

## Running the tests

```
pip install .[test]
pytest
```