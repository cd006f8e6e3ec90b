# pipex

`pipex` runs two commands connected by a pipe. The first command reads from
an input file, and the second command writes to an output file. It behaves
like this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

To install the test tools too and run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

You must give exactly four arguments. With any other number, `pipex` writes
`Wrong number of arguments` to standard error and exits with status 0.

- Each command is split on spaces and empty words are dropped. No quoting
  or escaping is applied.
- The program is looked up in each directory listed in `PATH`, in order. The
  first `directory/name` that exists and is executable is used.
- If the input file cannot be opened, `Problems with file` is reported on
  standard error and the first command reads from the null device instead.
- The output file is created or truncated with mode `0644`. If it cannot be
  opened, `Problems with file` is reported and the exit status is 1. Before
  that, if the first command has the form `sleep N` and N is positive,
  `pipex` waits N seconds.
- A command that cannot be found is reported as `command not found`. If the
  first command is missing, the second command reads from the null device.
- The exit status is the exit status of the second command. It is 127 when
  that command cannot be found, and 1 when it cannot be started or is killed
  by a signal.

Example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

## Library use

`pipex.pipeline` runs the pipeline from Python:

```python
from pipex.pipeline import run_pipeline, PipexError

try:
    status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
except PipexError as error:
    print(error.message, error.exit_status)
```

`run_pipeline` takes an optional `env` mapping as its fifth argument. It is
used both to look up `PATH` and as the environment of the commands. When it
is omitted, the process environment is used. `open_files(infile, outfile,
first_command)` opens the two files on its own, following the rules listed
above.

`pipex.pathsearch` looks up commands:

```python
from pipex.pathsearch import path_entries, find_executable, resolve_command, CommandError

path_entries({"PATH": "/usr/bin::/bin"})          # ['/usr/bin', '/bin']
find_executable("ls", {"PATH": "/usr/bin:/bin"})  # e.g. '/usr/bin/ls'
resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})  # (path, ['ls', '-l'])
```

These functions raise `CommandError`, with its `message` and `exit_status`
set, in three cases:

- `PATH` is missing: message `Problems with commands`, status 1.
- The command line is empty: message `Problems with commands`, status 1.
- No executable is found: message `command not found`, status 127.

## Helper modules

- `pipex.text`:
  - `split_words(text, delimiter)` splits on one delimiter character.
  - `parse_int(text)` parses like atoi, wrapping to a 32-bit signed value.
  - `format_int(n)`, `trim(text, charset)` and `substring(text, start, length)`.
- `pipex.search`:
  - `find_substring(haystack, needle, limit)` and `compare_prefix(first, second, n)`.
  - `find_char(text, ch)` and `rfind_char(text, ch)`. Searching for `"\0"`
    finds the end of the string.
  - `bounded_copy(src, size)` and `bounded_concat(dest, src, size)`. Each
    returns the resulting text together with the length it tried to create.
- `pipex.chars`:
  - ASCII tests `is_alnum`, `is_alpha`, `is_ascii`, `is_digit` and `is_print`.
  - `to_lower` and `to_upper`. Both accept a one-character string or an
    integer code.
  - `map_indexed(text, func)` and `iter_indexed(buffer, func)`. Both call
    `func(index, item)`.
- `pipex.bytesops`:
  - `find_byte`, `compare_bytes`, `copy_bytes`, `move_bytes` (safe when the
    source and destination overlap), `fill_bytes` and `zero_bytes`.
  - `zeroed(count, size)` raises `OverflowError` when the size would overflow.
- `pipex.linkedlist`:
  - `Node` is one link of a list.
  - `LinkedList` supports `append`, `prepend`, `last`, `for_each`, `map`,
    `clear(release)`, iteration and `len`.
- `pipex.output`: `put_char`, `put_str`, `put_line` and `put_number` write to
  a text stream. `put_str` and `put_line` write nothing when given `None`.
- `pipex.cformat`:
  - `format_c(fmt, *args)` returns the formatted text.
  - `print_c(fmt, *args)` writes it to standard output and returns its length.
  - Supported conversions are `%c %s %d %i %u %x %X %p %%`.
  - The flag characters ` `, `+` and `-` are skipped. A space right before
    `d` or `i` puts a space in front of non-negative numbers.
  - A `None` string prints `(null)`, and a null pointer prints `(nil)`.

## What it does not do

`pipex` joins exactly two commands. It has no here-document input, no
appending output mode and no chains longer than two commands. It does not
run commands through a shell, so commands cannot use quotes, globs or
variables.