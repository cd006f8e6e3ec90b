"""Running two commands joined by a pipe between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections.abc import Mapping
from typing import BinaryIO, Optional, Sequence

from pipex.pathsearch import CommandError, resolve_command
from pipex.text import parse_int

ERR_FILE = "Problems with file"
ERR_C = "Problems with commands"
ERR_W = "Something went wrong"


class PipexError(Exception):
    """A failure that ends the whole pipeline with the given exit status."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status


def _report(message: str, error: Optional[OSError] = None) -> None:
    detail = f": {error.strerror}" if error is not None and error.strerror else ""
    print(f"{message}{detail}", file=sys.stderr)


def open_files(
    infile: str, outfile: str, first_command: str
) -> tuple[BinaryIO, BinaryIO]:
    """Open the input for reading and the output for writing, truncating it.

    An unreadable input is reported and replaced by the null device. When the
    output cannot be opened the pipeline fails; a first command of the form
    "sleep N" is honoured by sleeping N seconds first.
    """
    try:
        source = open(infile, "rb")
    except OSError as error:
        _report(ERR_FILE, error)
        try:
            source = open(os.devnull, "rb")
        except OSError as fallback_error:
            raise PipexError(ERR_W) from fallback_error
    try:
        descriptor = os.open(outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as error:
        source.close()
        if first_command.startswith("sleep "):
            seconds = parse_int(first_command[6:])
            if seconds > 0:
                time.sleep(seconds)
        raise PipexError(ERR_FILE) from error
    return source, os.fdopen(descriptor, "wb")


def _start(
    command_line: str,
    env: Optional[Mapping[str, str]],
    stdin,
    stdout,
) -> tuple[Optional[subprocess.Popen], int]:
    """Start a command, returning its process or the status its failure gives."""
    try:
        path, words = resolve_command(command_line, env)
    except CommandError as error:
        _report(error.message)
        return None, error.exit_status
    try:
        process = subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as error:
        _report(ERR_W, error)
        return None, 1
    return process, 0


def _exit_status(returncode: int) -> int:
    return returncode if returncode >= 0 else 1


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run first_command < infile | second_command > outfile.

    Returns the exit status of the second command: 127 when it cannot be
    found, 1 for other failures or when it is killed by a signal.
    """
    source, target = open_files(infile, outfile, first_command)
    with source, target:
        first, _ = _start(first_command, env, source, subprocess.PIPE)
        second_input = first.stdout if first is not None else subprocess.DEVNULL
        second, status = _start(second_command, env, second_input, target)
        if first is not None:
            first.stdout.close()
        if first is not None:
            first.wait()
        if second is None:
            return status
        return _exit_status(second.wait())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Wrong number of arguments")
        return 0
    infile, first_command, second_command, outfile = args
    try:
        return run_pipeline(infile, first_command, second_command, outfile)
    except PipexError as error:
        _report(error.message)
        return error.exit_status


if __name__ == "__main__":
    raise SystemExit(main())