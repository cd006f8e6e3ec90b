"""Locating commands along the directories of a PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from pipex.text import split_words

COMMAND_ERROR = "Problems with commands"
NOT_FOUND = "command not found"
NOT_FOUND_STATUS = 127


class CommandError(Exception):
    """A command could not be resolved; carries the exit status it leads to."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def path_entries(env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the non-empty directories listed in the PATH of env."""
    path = _environment(env).get("PATH")
    if path is None:
        raise CommandError(COMMAND_ERROR, 1)
    return split_words(path, ":")


def find_executable(name: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Return the first directory/name along PATH that exists and is executable."""
    for directory in path_entries(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    raise CommandError(NOT_FOUND, NOT_FOUND_STATUS)


def resolve_command(
    command_line: str, env: Optional[Mapping[str, str]] = None
) -> tuple[str, list[str]]:
    """Split a command line on spaces and locate its program.

    Returns the program's full path and the argument list, whose first item
    is the command name as written.
    """
    words = split_words(command_line, " ")
    if not words:
        raise CommandError(COMMAND_ERROR, 1)
    return find_executable(words[0], env), words