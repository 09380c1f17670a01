"""
Main entry point for tracing track maps.

Usage:
    python -m src.main config.yaml
    python -m src.main --map maps/basic.txt --render
    python -m src.main --sample basic --verbose
    python -m src.main config.yaml --output results/run1.json
"""

import argparse
import sys
from pathlib import Path

import yaml

from .pathfinder import format_issue, list_samples
from .runner import MapSource, Runner, RunConfig


def load_config(config_path: str) -> RunConfig:
    """Load run configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return RunConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Trace the path through an ASCII track map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  max_steps: 10000
  render: true
  maps:
    - name: basic
      sample: basic
    - file: maps/loop.txt
    - name: inline
      rows:
        - "@-A-+"
        - "    |"
        - "x-B-+"
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (not needed with --map or --sample)"
    )
    parser.add_argument(
        "--map",
        action="append",
        default=[],
        help="Trace a map from a text file (may be repeated)"
    )
    parser.add_argument(
        "--sample",
        action="append",
        default=[],
        help="Trace a bundled sample map (may be repeated)"
    )
    parser.add_argument(
        "--list-samples",
        action="store_true",
        help="List bundled sample maps and exit"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        help="Override the step bound for every map"
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Draw the walked cells of each traced map"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args()

    if args.list_samples:
        for name in list_samples():
            print(name)
        return 0

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = RunConfig()

    config.maps.extend(MapSource(file=path) for path in args.map)
    config.maps.extend(MapSource(sample=name) for name in args.sample)

    if not config.maps:
        print("Error: nothing to trace (give a config file, --map or --sample)", file=sys.stderr)
        return 1

    if args.max_steps is not None:
        config.max_steps = args.max_steps
    if args.render:
        config.render = True

    runner = Runner.create(config=config)

    try:
        result = runner.run(verbose=args.verbose)
    except (FileNotFoundError, KeyError) as e:
        print(f"Error loading map: {e}", file=sys.stderr)
        # Keep whatever was traced before the failure
        if args.output:
            runner.save_result(args.output)
        return 1

    if args.output:
        runner.save_result(args.output)
        if args.verbose:
            print()
            print(f"Results saved to: {args.output}")

    # Print summary
    if not args.verbose:
        for map_run in result.maps:
            report = map_run.report
            if map_run.ok:
                print(f"{map_run.name}: path={report.path} word={report.word}")
                if report.rendered:
                    print(report.rendered)
            elif map_run.load_errors:
                print(
                    f"{map_run.name}: {len(map_run.load_errors)} invalid cells, first: "
                    f"{format_issue(map_run.load_errors[0])}",
                    file=sys.stderr,
                )
            else:
                print(f"{map_run.name}: {format_issue(report.error)}", file=sys.stderr)

    return 0 if result.failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
