"""Dockermatrix - Dockerfile generator for PHP x Node.js version matrices.

Renders one Jinja2 template per version pair into a clean output directory
and records what was produced in a JSON manifest.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
