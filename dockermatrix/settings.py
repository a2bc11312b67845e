from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import RunContext


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DOCKERMATRIX_", case_sensitive=False)

    config_path: Path = Path("config.json")
    template_path: Path = Path("templates/base.Dockerfile.j2")
    output_dir: Path = Path("output")
    extension: str = Field(default="Dockerfile", min_length=1)
    max_workers: int | None = Field(default=None, ge=1)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    def to_run_context(self, **overrides: Any) -> RunContext:
        """Build a RunContext; ``None`` overrides fall back to settings."""
        values: dict[str, Any] = {
            "config_path": self.config_path,
            "template_path": self.template_path,
            "output_root": self.output_dir,
            "extension": self.extension,
            "max_workers": self.max_workers,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RunContext(**values)
