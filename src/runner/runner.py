import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, Field

from .models import MapRun, MapSource, RunConfig, RunResult
from ..pathfinder import check_cells, find_path, get_sample, load_map, parse_map, format_issue


class Runner(BaseModel):
    """
    Traces every map named in a RunConfig and collects the reports.

    Attributes:
        config: Run configuration
        map_runs: Results so far, in config order
        started_at: When the run started
        ended_at: When the run finished
    """

    config: RunConfig = Field(default_factory=RunConfig)
    map_runs: List[MapRun] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @classmethod
    def create(cls, config: Optional[RunConfig] = None, **config_kwargs: Any) -> "Runner":
        """
        Factory method to create a runner.

        Args:
            config: Optional RunConfig instance
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = RunConfig(**config_kwargs)
        return cls(config=config)

    def trace_source(self, source: MapSource) -> MapRun:
        """Load one map and trace it. Loading errors skip the trace."""
        if source.file is not None:
            grid, errors = load_map(source.file)
        elif source.sample is not None:
            grid = get_sample(source.sample)
            errors = check_cells(grid)
        else:
            grid, errors = parse_map("\n".join(source.rows))

        if errors:
            return MapRun(name=source.label, load_errors=errors)

        report = find_path(grid, max_steps=self.config.max_steps)
        if not self.config.render:
            report.rendered = None
        return MapRun(name=source.label, report=report)

    def run(
        self,
        on_map: Optional[Callable[[MapRun], None]] = None,
        verbose: bool = False,
    ) -> RunResult:
        """
        Trace every configured map.

        Args:
            on_map: Optional callback called after each map
            verbose: If True, print progress to stdout

        Returns:
            RunResult containing every map's report
        """
        self.started_at = datetime.now()
        self.map_runs = []

        if verbose:
            print(f"Tracing {len(self.config.maps)} maps")
            print("-" * 40)

        for source in self.config.maps:
            map_run = self.trace_source(source)
            self.map_runs.append(map_run)

            if verbose:
                self._print_map_run(map_run)

            if on_map:
                on_map(map_run)

        self.ended_at = datetime.now()

        if verbose:
            result = self.get_result()
            print("-" * 40)
            print(f"Passed: {result.passed}  Failed: {result.failed}")

        return self.get_result()

    def get_result(self) -> RunResult:
        passed = sum(1 for m in self.map_runs if m.ok)
        duration = 0.0
        if self.started_at and self.ended_at:
            duration = (self.ended_at - self.started_at).total_seconds()

        return RunResult(
            config=self.config,
            maps=self.map_runs,
            passed=passed,
            failed=len(self.map_runs) - passed,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=self.ended_at.isoformat() if self.ended_at else "",
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the run result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)

    @staticmethod
    def _print_map_run(map_run: MapRun) -> None:
        print(f"\n{map_run.name}")

        if map_run.load_errors:
            print(f"✗ Map has {len(map_run.load_errors)} invalid cells:")
            for issue in map_run.load_errors[:3]:
                print(f"  - {format_issue(issue)}")
            if len(map_run.load_errors) > 3:
                print(f"  ... and {len(map_run.load_errors) - 3} more")
            return

        report = map_run.report
        if report.valid:
            print(f"✓ Path: {report.path}")
            print(f"  Word: {report.word} ({report.steps} steps)")
            if report.rendered:
                print()
                print(report.rendered)
        else:
            print(f"✗ {format_issue(report.error)}")
