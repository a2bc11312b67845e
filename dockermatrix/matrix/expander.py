"""Cross-product expansion of the version configuration."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.models import VersionConfig, VersionPair
from .loader import validate_config

logger = logging.getLogger(__name__)


def expand(config: VersionConfig | Mapping[str, Any]) -> list[VersionPair]:
    """Expand a version configuration into every (php, node) pair.

    PHP versions form the outer loop and Node.js versions the inner loop,
    both in configured order. Duplicates are kept.

    Args:
        config: Validated config or a raw mapping

    Returns:
        Ordered list of version pairs, len(php) * len(node) long
    """
    if not isinstance(config, VersionConfig):
        config = validate_config(dict(config) if isinstance(config, Mapping) else config)

    pairs = [
        VersionPair(php=php_version, node=node_version)
        for php_version in config.php
        for node_version in config.node
    ]

    logger.debug(
        f"Expanded {len(config.php)} php x {len(config.node)} node "
        f"into {len(pairs)} pair(s)"
    )
    return pairs
