"""Command line entry point: pipex file1 cmd1 cmd2 file2."""

from __future__ import annotations

import sys

from pipex.pipeline import PipexError, run_pipeline

USAGE = "Usage: pipex file1 cmd1 cmd2 file2\n"


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline described by *argv* and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print(USAGE, file=sys.stderr)
        return 0
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_status


if __name__ == "__main__":
    sys.exit(main())