"""Clean-rebuild pipeline: expand, render, write, record."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path

from jinja2 import Template

from ..core.errors import ArtifactIOError, DockerMatrixError
from ..core.models import PlannedArtifact, RunContext, RunResult, WrittenArtifact
from ..matrix import expander, loader, planner
from ..rendering import engine, io
from . import manifest

logger = logging.getLogger(__name__)


def plan_run(ctx: RunContext) -> list[PlannedArtifact]:
    """Load, expand and plan without touching the output root.

    Args:
        ctx: Run parameters

    Returns:
        Planned artifacts in expansion order
    """
    config = loader.load_config(ctx.config_path)
    pairs = expander.expand(config)
    return planner.plan(pairs, ctx.output_root, ctx.extension)


def write_artifact(
    template: Template,
    artifact: PlannedArtifact,
    file_mode: int = 0o644,
    output_root: Path | None = None,
) -> WrittenArtifact:
    """Render and write a single planned artifact.

    Args:
        template: Compiled template, shared read-only
        artifact: Pair and destination to produce
        file_mode: File permissions
        output_root: When given, the destination must resolve inside it

    Returns:
        Manifest entry for the written file
    """
    pair = artifact.version_pair
    try:
        if output_root is not None:
            io.ensure_within(artifact.output_path, output_root)
        text = engine.render(template, pair)
        io.atomic_write_text(artifact.output_path, text, mode=file_mode)
    except ArtifactIOError as e:
        raise ArtifactIOError(
            f"Cannot write artifact ({e.args[0]})", artifact.output_path, pair
        ) from e

    logger.debug(f"Wrote {artifact.output_path}")
    return WrittenArtifact(php=pair.php, node=pair.node, file=str(artifact.output_path))


def write_all(
    template: Template,
    artifacts: list[PlannedArtifact],
    max_workers: int | None = None,
    file_mode: int = 0o644,
    output_root: Path | None = None,
) -> list[WrittenArtifact]:
    """Render and write all artifacts concurrently.

    Results keep the order of ``artifacts`` regardless of completion order.
    The first failure is re-raised once running tasks have settled; tasks
    that have not started yet are cancelled.
    """
    if not artifacts:
        return []
    results: list[WrittenArtifact | None] = [None] * len(artifacts)

    executor = ThreadPoolExecutor(
        max_workers=max_workers, thread_name_prefix="dockermatrix"
    )
    try:
        futures: dict[Future[WrittenArtifact], int] = {
            executor.submit(
                write_artifact, template, artifact, file_mode, output_root
            ): index
            for index, artifact in enumerate(artifacts)
        }
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        failed = [f for f in futures if f in done and f.exception() is not None]
        if failed:
            first = min(failed, key=futures.__getitem__)
            executor.shutdown(wait=True, cancel_futures=True)
            raise first.exception()  # type: ignore[misc]
        for future, index in futures.items():
            results[index] = future.result()
    finally:
        executor.shutdown(wait=True)

    return [item for item in results if item is not None]


def build(ctx: RunContext) -> list[WrittenArtifact]:
    """Regenerate the whole output root from scratch.

    Raises the first fatal DockerMatrixError; the output root may then be
    left partially populated, never with a manifest.

    Args:
        ctx: Run parameters

    Returns:
        Manifest entries in expansion order
    """
    logger.info(f"Cleaning {ctx.output_root}")
    io.remove_tree(ctx.output_root)

    artifacts = plan_run(ctx)
    logger.info(f"Planned {len(artifacts)} artifact(s) from {ctx.config_path}")

    template = engine.load_template(ctx.template_path)

    io.create_root(ctx.output_root)

    written = write_all(
        template, artifacts, ctx.max_workers, ctx.file_mode, ctx.output_root
    )

    manifest_path = manifest.write_manifest(
        ctx.output_root, written, ctx.manifest_name, ctx.file_mode
    )
    logger.info(f"Wrote {len(written)} artifact(s) and manifest {manifest_path}")
    return written


def run(ctx: RunContext) -> RunResult:
    """Run the pipeline and report the outcome instead of raising."""
    try:
        written = build(ctx)
    except DockerMatrixError as e:
        logger.debug(f"Run aborted: {e}")
        return RunResult(status="aborted", error=e)
    return RunResult(status="completed", manifest=written)
