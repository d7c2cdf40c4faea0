"""Looking up commands along the PATH of an environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.words import split_words


def find_path(env: Mapping[str, str] | None) -> str | None:
    """Return the PATH value of *env*, or None when there is none."""
    if not env:
        return None
    return env.get("PATH")


def find_executable(command: str, env: Mapping[str, str] | None) -> str | None:
    """Return the first ``dir/command`` along PATH that exists, or None."""
    if not command:
        return None
    path = find_path(env)
    if path is None:
        return None
    for directory in split_words(path, ":"):
        candidate = f"{directory}/{command}"
        if os.path.exists(candidate):
            return candidate
    return None