"""Shared test fixtures for dockermatrix."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dockermatrix.core.models import RunContext


def write_config(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Minimal template using both version variables."""
    path = tmp_path / "base.Dockerfile.j2"
    path.write_text("FROM php:{{php}}-node{{node}}", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return write_config(tmp_path / "config.json", {"php": ["7.2", "7.4"], "node": ["10"]})


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def run_context(config_file: Path, template_file: Path, output_root: Path) -> RunContext:
    return RunContext(
        config_path=config_file,
        template_path=template_file,
        output_root=output_root,
    )
