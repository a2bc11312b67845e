"""Template rendering engine."""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2
from jinja2 import Environment, StrictUndefined, Template

from ..core.errors import ArtifactIOError, RenderError, TemplateSyntaxError
from ..core.models import VersionPair

logger = logging.getLogger(__name__)


def _environment() -> Environment:
    # StrictUndefined turns references to anything but php/node into a RenderError
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )


def compile_template(source: str, name: str | None = None) -> Template:
    """Compile template source once for repeated rendering.

    Args:
        source: Template source text
        name: Optional name used in error messages

    Returns:
        Compiled Jinja2 template
    """
    try:
        return _environment().from_string(source)
    except jinja2.TemplateSyntaxError as e:
        where = name or e.name or "<template>"
        raise TemplateSyntaxError(
            f"{where}:{e.lineno}: {e.message}", lineno=e.lineno
        ) from e


def load_template(template_path: Path) -> Template:
    """Read and compile a template file.

    Args:
        template_path: Path to the template file

    Returns:
        Compiled Jinja2 template
    """
    try:
        source = template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ArtifactIOError(
            f"Cannot read template ({e.strerror or e})", template_path
        ) from e
    except UnicodeDecodeError as e:
        raise TemplateSyntaxError(f"{template_path}: not valid UTF-8 ({e.reason})") from e

    logger.debug(f"Compiling template: {template_path}")
    return compile_template(source, name=str(template_path))


def render(template: Template, pair: VersionPair) -> str:
    """Render a compiled template for one version pair.

    Args:
        template: Compiled template, shared read-only between callers
        pair: Version pair used as the render context

    Returns:
        Rendered document text
    """
    try:
        return template.render(**pair.as_context())
    except jinja2.UndefinedError as e:
        raise RenderError(f"Undefined template variable: {e.message}", pair) from e
    except jinja2.TemplateError as e:
        raise RenderError(f"Template rendering failed: {e}", pair) from e
    except Exception as e:
        # Errors raised by template expressions and filters, e.g. {{ php + 1 }}
        raise RenderError(f"Template rendering failed: {type(e).__name__}: {e}", pair) from e
