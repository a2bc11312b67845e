"""Domain models for the version matrix and the artifacts it produces."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .errors import DockerMatrixError


class VersionConfig(BaseModel):
    """Configured PHP and Node.js version lists."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    php: list[str] = Field(..., min_length=1, description="PHP versions (outer)")
    node: list[str] = Field(..., min_length=1, description="Node.js versions (inner)")


class VersionPair(BaseModel):
    """One point in the php x node cross product."""

    model_config = ConfigDict(frozen=True)

    php: str
    node: str

    def as_context(self) -> dict[str, str]:
        """Return the template context for this pair."""
        return {"php": self.php, "node": self.node}

    def __str__(self) -> str:
        return f"php={self.php} node={self.node}"


class PlannedArtifact(BaseModel):
    """A version pair bound to its output location."""

    model_config = ConfigDict(frozen=True)

    version_pair: VersionPair
    output_path: Path


class WrittenArtifact(BaseModel):
    """Manifest entry for a successfully written artifact."""

    model_config = ConfigDict(frozen=True)

    php: str
    node: str
    file: str


class RunContext(BaseModel):
    """Explicit parameters for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    config_path: Path = Field(..., description="Version configuration (JSON)")
    template_path: Path = Field(..., description="Dockerfile template")
    output_root: Path = Field(..., description="Output directory, rebuilt every run")
    extension: str = Field(default="Dockerfile", min_length=1)
    manifest_name: str = Field(default="output.json", min_length=1)
    max_workers: int | None = Field(default=None, ge=1)
    file_mode: int = Field(default=0o644, description="File permissions (octal)")


class RunResult(BaseModel):
    """Outcome of a pipeline run."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Literal["completed", "aborted"]
    manifest: list[WrittenArtifact] = Field(default_factory=list)
    error: DockerMatrixError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "completed"
