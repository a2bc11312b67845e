"""Core models and errors."""

from .errors import (
    ArtifactIOError,
    ConfigError,
    DockerMatrixError,
    RenderError,
    TemplateSyntaxError,
)
from .models import (
    PlannedArtifact,
    RunContext,
    RunResult,
    VersionConfig,
    VersionPair,
    WrittenArtifact,
)

__all__ = [
    "ArtifactIOError",
    "ConfigError",
    "DockerMatrixError",
    "PlannedArtifact",
    "RenderError",
    "RunContext",
    "RunResult",
    "TemplateSyntaxError",
    "VersionConfig",
    "VersionPair",
    "WrittenArtifact",
]
