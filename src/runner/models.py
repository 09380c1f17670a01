"""
Pydantic models for the runner layer.

Configuration for a batch of maps to trace and the result of tracing them.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from ..pathfinder.models import PathReport, TraceIssue


class MapSource(BaseModel):
    """Where a single map comes from: a file, a bundled sample, or inline rows."""
    name: Optional[str] = None
    file: Optional[str] = None
    sample: Optional[str] = None
    rows: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_single_source(self) -> "MapSource":
        given = [s for s in (self.file, self.sample, self.rows) if s is not None]
        if len(given) != 1:
            raise ValueError("exactly one of 'file', 'sample' or 'rows' must be set")
        return self

    @property
    def label(self) -> str:
        """Display name, falling back to the source itself."""
        if self.name:
            return self.name
        if self.file:
            return self.file
        if self.sample:
            return self.sample
        return "inline"


class RunConfig(BaseModel):
    """Configuration for a tracing run."""
    maps: List[MapSource] = Field(default_factory=list)
    max_steps: Optional[int] = Field(None, ge=1)
    render: bool = False


class MapRun(BaseModel):
    """Result of tracing one map."""
    name: str
    report: Optional[PathReport] = None
    load_errors: List[TraceIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.load_errors and self.report is not None and self.report.valid


class RunResult(BaseModel):
    """Result of a complete run."""
    config: RunConfig
    maps: List[MapRun] = Field(default_factory=list)
    passed: int = 0
    failed: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
