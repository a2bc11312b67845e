"""Manifest serialization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from ..core.models import WrittenArtifact
from ..rendering.io import atomic_write_text


def dump_manifest(items: Sequence[WrittenArtifact]) -> str:
    """Serialize manifest entries as a 2-space indented JSON array.

    No trailing newline, so the output is byte-identical to
    ``JSON.stringify(items, null, 2)``.
    """
    return json.dumps(
        [item.model_dump(mode="json") for item in items], indent=2, ensure_ascii=False
    )


def write_manifest(
    output_root: Path,
    items: Sequence[WrittenArtifact],
    name: str = "output.json",
    mode: int = 0o644,
) -> Path:
    """Write the manifest into the output root.

    Returns:
        Manifest file path
    """
    path = output_root / name
    atomic_write_text(path, dump_manifest(items), mode=mode)
    return path
