"""Batch runner for tracing many maps."""

from .models import MapSource, RunConfig, MapRun, RunResult
from .runner import Runner

__all__ = [
    "MapSource",
    "RunConfig",
    "MapRun",
    "RunResult",
    "Runner",
]
