"""Run two commands joined by a pipe, from an input file to an output file."""

__version__ = "1.0.0"
__all__ = ["words", "environment", "pipeline", "cli"]