"""Generation pipeline."""

from .orchestrator import build, plan_run, run

__all__ = ["build", "plan_run", "run"]
