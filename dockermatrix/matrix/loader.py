"""Version configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import ConfigError
from ..core.models import VersionConfig

logger = logging.getLogger(__name__)


def load_config(path: Path) -> VersionConfig:
    """Load and validate a JSON version configuration.

    Args:
        path: Path to a JSON file of the form {"php": [...], "node": [...]}

    Returns:
        Validated version configuration
    """
    logger.debug(f"Loading version config: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read version config {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Version config {path} is not valid UTF-8: {e.reason}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    return validate_config(data, source=str(path))


def validate_config(data: object, source: str = "<config>") -> VersionConfig:
    """Validate raw configuration data into a VersionConfig."""
    if isinstance(data, VersionConfig):
        return data
    if not isinstance(data, dict):
        raise ConfigError(
            f"{source}: expected an object with 'php' and 'node' lists, "
            f"got {type(data).__name__}"
        )
    try:
        return VersionConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(map(str, err['loc'])) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"{source}: {problems}") from e
