"""Splitting a string into words separated by a single character."""

from __future__ import annotations


def _check_separator(sep: str) -> None:
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def count_words(text: str, sep: str) -> int:
    """Return how many non-empty runs of characters other than *sep* are in *text*."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> list[str]:
    """Split *text* on *sep*, dropping the empty words that repeated separators leave."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]