"""Output path planning."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..core.models import PlannedArtifact, VersionPair


def output_path(pair: VersionPair, output_root: Path, extension: str = "Dockerfile") -> Path:
    """Return <root>/php-<php>/node-<node>.<extension> for a pair."""
    return output_root / f"php-{pair.php}" / f"node-{pair.node}.{extension}"


def plan(
    pairs: Iterable[VersionPair], output_root: Path, extension: str = "Dockerfile"
) -> list[PlannedArtifact]:
    """Bind each pair to its output path, preserving order.

    Duplicate pairs map to the same path; the later write wins on disk.
    """
    return [
        PlannedArtifact(
            version_pair=pair, output_path=output_path(pair, output_root, extension)
        )
        for pair in pairs
    ]
