"""File I/O operations for rendering."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from pathlib import Path

from ..core.errors import ArtifactIOError


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Safe to call concurrently for paths sharing ancestors.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    An existing file at ``path`` is replaced.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    try:
        ensure_parent(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise ArtifactIOError(f"Cannot prepare directory ({e.strerror or e})", path) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    except OSError as e:
        raise ArtifactIOError(f"Cannot write file ({e.strerror or e})", path) from e
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_name)


def remove_tree(path: Path) -> None:
    """Recursively delete ``path``; a missing path is a no-op.

    Args:
        path: Directory or file to remove
    """
    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)
    except FileNotFoundError:
        return
    except OSError as e:
        raise ArtifactIOError(f"Cannot remove ({e.strerror or e})", path) from e


def ensure_within(path: Path, root: Path) -> None:
    """Raise ArtifactIOError unless ``path`` resolves inside ``root``."""
    if not path.resolve().is_relative_to(root.resolve()):
        raise ArtifactIOError("Refusing to write outside output root", path)


def create_root(path: Path) -> None:
    """Create the output root directory (and its parents)."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactIOError(f"Cannot create directory ({e.strerror or e})", path) from e
