"""Main CLI application."""

from __future__ import annotations

import logging
from typing import Any

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.errors import DockerMatrixError
from ..core.models import RunContext
from ..pipeline import orchestrator
from ..settings import Settings
from .parsers import parse_path, parse_workers

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dockermatrix",
    help="Generate one Dockerfile per PHP x Node.js version pair from a Jinja2 template.",
    no_args_is_help=True,
)

ConfigOption = Annotated[
    str,
    typer.Option(
        "--config",
        help="Version config JSON with 'php' and 'node' lists (default: config.json).",
        metavar="FILE",
    ),
]
TemplateOption = Annotated[
    str,
    typer.Option(
        "--template",
        help="Dockerfile template (default: templates/base.Dockerfile.j2).",
        metavar="FILE",
    ),
]
OutputOption = Annotated[
    str,
    typer.Option(
        "--output",
        help="Output directory, deleted and rebuilt on every run (default: output).",
        metavar="DIR",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        typer.echo(f"Invalid DOCKERMATRIX_* settings: {e}", err=True)
        raise typer.Exit(code=1) from e


def _run_context(settings: Settings, **overrides: Any) -> RunContext:
    try:
        return settings.to_run_context(**overrides)
    except ValidationError as e:
        logger.error(f"Invalid run parameters: {e}")
        raise typer.Exit(code=1) from e


def _configure_logging(settings: Settings, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def generate(
    config: ConfigOption = "",
    template: TemplateOption = "",
    output: OutputOption = "",
    workers: Annotated[
        str,
        typer.Option(
            "--workers",
            help="Concurrent render/write workers (default: executor default).",
            metavar="N",
        ),
    ] = "",
    verbose: VerboseOption = False,
) -> None:
    """Clean the output directory and regenerate every Dockerfile."""
    settings = _load_settings()
    _configure_logging(settings, verbose)

    ctx = _run_context(
        settings,
        config_path=parse_path(config),
        template_path=parse_path(template),
        output_root=parse_path(output),
        max_workers=parse_workers(workers),
    )
    logger.debug(f"Run context: {ctx}")

    result = orchestrator.run(ctx)
    if not result.ok:
        logger.error(str(result.error))
        raise typer.Exit(code=1)

    logger.info(f"Dockerfiles generated ({len(result.manifest)} file(s))")


@app.command()
def plan(
    config: ConfigOption = "",
    output: OutputOption = "",
    verbose: VerboseOption = False,
) -> None:
    """List the version pairs and paths a run would produce, without writing."""
    settings = _load_settings()
    _configure_logging(settings, verbose)

    ctx = _run_context(
        settings,
        config_path=parse_path(config),
        output_root=parse_path(output),
    )
    try:
        artifacts = orchestrator.plan_run(ctx)
    except DockerMatrixError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    for artifact in artifacts:
        pair = artifact.version_pair
        typer.echo(f"{pair.php}\t{pair.node}\t{artifact.output_path}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
