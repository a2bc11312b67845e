"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer


def parse_workers(value: str) -> int | None:
    """Parse the worker count; empty means the executor default."""
    if not value:
        return None
    try:
        workers = int(value)
    except ValueError as e:
        raise typer.BadParameter(f"Must be a positive integer, got: {value!r}") from e
    if workers < 1:
        raise typer.BadParameter(f"Must be a positive integer, got: {value!r}")
    return workers


def parse_path(value: str) -> Path | None:
    """Parse an optional path option; empty means use settings."""
    return Path(value) if value else None
