"""Command line entry point.

Runs the configured sweeps, prints the CSV export and persists the run under
``output.dir/<timestamp>/``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from algobench.algorithms.registry import CandidateRegistry
from algobench.config import BenchConfig, load_config
from algobench.export import format_results_csv, make_run_dir, persist_report
from algobench.generator import make_rng
from algobench.models import SweepReport
from algobench.sweep import SweepDriver
from algobench.timing import TimingRunner

logger = logging.getLogger("algobench")


def run_benchmark(config: BenchConfig) -> SweepReport:
    registry = CandidateRegistry()
    runner = TimingRunner(
        disable_gc=config.timing.disable_gc,
        slow_trial_ms=config.timing.slow_trial_ms,
    )
    driver = SweepDriver(registry, runner=runner, rng=make_rng(config.seed))
    report = SweepReport()
    if config.sorting is not None:
        report.extend(driver.run_sort_sweep(config.sorting))
    if config.scalar is not None:
        report.extend(driver.run_scalar_sweep(config.scalar))
    return report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sorting / Fibonacci microbenchmark harness")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to YAML/JSON config file (default: config.yaml)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Override the config seed")
    parser.add_argument("--log-level", default=None, help="Override the config log level")
    return parser


def _run(config: BenchConfig) -> SweepReport:
    report = run_benchmark(config)
    if config.output.print_csv:
        sys.stdout.write(format_results_csv(report.results))
    run_dir = make_run_dir(config.output.dir)
    persist_report(report, run_dir, meta={"seed": config.seed})
    return report


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config(args.config)
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    if overrides:
        config = replace(config, **overrides)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        report = _run(config)
    except Exception:
        logger.exception("Benchmark aborted before producing a report")
        return 2
    if not report.ok:
        logger.warning(
            "%d of %d trials failed", len(report.failures), report.expected_trials
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
