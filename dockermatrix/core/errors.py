"""Error types raised by the generation pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import VersionPair


class DockerMatrixError(Exception):
    """Base class for all fatal pipeline errors."""


class ConfigError(DockerMatrixError):
    """Raised when the version configuration is missing or malformed."""


class TemplateSyntaxError(DockerMatrixError):
    """Raised when the template source fails to compile."""

    def __init__(self, message: str, lineno: int | None = None) -> None:
        super().__init__(message)
        self.lineno = lineno


class RenderError(DockerMatrixError):
    """Raised when rendering fails for one version pair."""

    def __init__(self, message: str, version_pair: VersionPair) -> None:
        super().__init__(f"{message} ({version_pair})")
        self.version_pair = version_pair


class ArtifactIOError(DockerMatrixError, OSError):
    """Raised on filesystem failures while cleaning, writing or reading."""

    def __init__(
        self,
        message: str,
        path: Path,
        version_pair: VersionPair | None = None,
    ) -> None:
        detail = f"{message}: {path}"
        if version_pair is not None:
            detail = f"{detail} ({version_pair})"
        super().__init__(detail)
        self.path = path
        self.version_pair = version_pair

    def __str__(self) -> str:
        return self.args[0]
