"""Running two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping
from typing import BinaryIO, IO

from pipex.environment import find_executable
from pipex.words import split_words

EXEC_FAILED = "execve() failed"


class PipexError(Exception):
    """A failure that ends the pipeline with a given exit status."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.exit_status = exit_status


class FileOpenError(PipexError):
    """The input or output file could not be opened."""

    def __init__(self, path: str, error: OSError, exit_status: int = 1) -> None:
        super().__init__(f"{path}: {error.strerror}", exit_status)
        self.path = path
        self.error = error


class CommandNotFoundError(PipexError):
    """A command was not found along PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: {os.strerror(errno.ENOENT)}", 127)
        self.command = command


def open_files(infile: str, outfile: str) -> tuple[BinaryIO, BinaryIO]:
    """Open *infile* for reading and create or truncate *outfile* for writing.

    Both files are attempted before any error is reported. An input file
    that exists but cannot be read gives exit status 0; any other failure
    gives exit status 1.
    """
    source: BinaryIO | None = None
    sink: BinaryIO | None = None
    in_error: OSError | None = None
    out_error: OSError | None = None

    try:
        source = open(infile, "rb")
    except OSError as exc:
        in_error = exc
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
        sink = os.fdopen(fd, "wb")
    except OSError as exc:
        out_error = exc

    if in_error is None and out_error is None:
        return source, sink  # type: ignore[return-value]

    for handle in (source, sink):
        if handle is not None:
            handle.close()
    if in_error is not None:
        status = 0 if os.path.exists(infile) else 1
        raise FileOpenError(infile, in_error, status) from in_error
    raise FileOpenError(outfile, out_error, 1) from out_error  # type: ignore[arg-type]


def resolve_command(command: str, env: Mapping[str, str] | None) -> tuple[str, list[str]]:
    """Split *command* into arguments and find its executable along PATH."""
    args = split_words(command, " ")
    executable = find_executable(args[0], env) if args else None
    if executable is None:
        raise CommandNotFoundError(command)
    return executable, args


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _spawn(
    command: str,
    env: Mapping[str, str],
    stdin: IO[bytes] | int,
    stdout: IO[bytes] | int,
) -> subprocess.Popen:
    executable, args = resolve_command(command, env)
    try:
        return subprocess.Popen(
            args, executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise PipexError(f"{EXEC_FAILED}: {exc.strerror}", 1) from exc


def _exit_status(returncode: int) -> int:
    return returncode if returncode >= 0 else 128 - returncode


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the exit status of *cmd2*.

    A failure of *cmd1* is reported on stderr and *cmd2* then reads empty
    input; a failure of *cmd2* raises PipexError.
    """
    environ: Mapping[str, str] = os.environ if env is None else env
    source, sink = open_files(infile, outfile)
    with source, sink:
        try:
            first: subprocess.Popen | None = _spawn(
                cmd1, environ, source, subprocess.PIPE
            )
        except PipexError as exc:
            _report(str(exc))
            first = None

        feed = first.stdout if first is not None else subprocess.DEVNULL
        try:
            second = _spawn(cmd2, environ, feed, sink)
        except PipexError:
            if first is not None:
                first.communicate()
            raise

        if first is not None:
            first.stdout.close()
            first.wait()
        return _exit_status(second.wait())