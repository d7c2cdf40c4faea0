# pipex

`pipex` runs two commands connected by a pipe. The first command reads from an
input file, and its output goes to the second command. The output of the second
command is written to an output file.

It does the same job as this shell line:

```sh
< file1 cmd1 | cmd2 > file2
```

## Installation

```sh
pip install .
```

To run the tests:

```sh
pip install ".[test]"
pytest
```

## Command-line use

```sh
pipex file1 cmd1 cmd2 file2
```

Put each command in quotes if it takes arguments:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Each command is split on spaces, and empty pieces are skipped. No shell quoting
or expansion is applied. The first word of each command is joined to each
directory listed in the `PATH` variable, in order, and the first path that
exists is run with the remaining words as its arguments.

If the number of arguments is not exactly four, a usage line is printed to
standard error and the exit status is 0.

### Exit behaviour

Both files are opened before any command starts. The output file is created if
it is missing and emptied if it already exists.

- If the input file cannot be opened, the error goes to standard error. The
  exit status is 0 when the file exists but cannot be read, and 1 otherwise.
- If the output file cannot be opened or created, the error goes to standard
  error and the exit status is 1.
- If the first command cannot be found on `PATH`, the error goes to standard
  error and the second command still runs, reading empty input.
- If the second command cannot be found on `PATH`, the error goes to standard
  error and the exit status is 127.
- Otherwise the exit status is that of the second command. If it was ended by a
  signal, the status is 128 plus the signal number.

## Library use

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)
```

`run_pipeline(infile, cmd1, cmd2, outfile, env=None)` uses `os.environ` when
`env` is not given, and returns the exit status described above.

These helpers can also be used on their own:

- `pipex.words.split_words(text, sep)` splits a string on one separator
  character and drops empty pieces; `count_words(text, sep)` returns how many
  pieces that gives. A separator that is not exactly one character raises
  `ValueError`.
- `pipex.environment.find_path(env)` returns the value of `PATH` from a
  mapping, or `None`.
- `pipex.environment.find_executable(command, env)` returns the first
  `dir/command` along `PATH` that exists, or `None`.
- `pipex.pipeline.open_files(infile, outfile)` opens the input file for reading
  and creates or empties the output file, returning both binary file objects.
- `pipex.pipeline.resolve_command(command, env)` splits a command line and
  returns the resolved executable with the list of arguments.
- `pipex.cli.main(argv=None)` runs the command-line program and returns its
  exit status.

Errors are raised as `PipexError`, which carries an `exit_status`, or one of
its subclasses:

- `FileOpenError`, with `path` and the underlying `error`;
- `CommandNotFoundError`, with `command` and an exit status of 127.

## What it does not do

- It runs exactly two commands; longer chains are not supported.
- There is no here-document mode and no appending to the output file.
- Commands are not passed through a shell, so quotes, globs, variables and
  redirections inside a command are not interpreted.