"""Sweep driver: walks the full trial matrix and collects results.

Sorting sweep
    size (outer) x shape (middle) x candidate (inner). One dataset is
    generated per (size, shape) and every candidate receives its own copy.
Scalar sweep
    sample point (outer) x candidate (inner) over evenly spaced points in
    ``[1, upper_bound]``.

Both sweeps run through ``run_with_headroom``, so deep recursion in a
candidate does not depend on the caller having raised the recursion limit.

Failure isolation is per trial: an exception is logged, stored as a
``TrialFailure`` and the loop moves on. Results already appended are never
touched.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from algobench.algorithms.base import SCALAR_FAMILY, SORT_FAMILY, Candidate
from algobench.algorithms.registry import CandidateRegistry
from algobench.algorithms.sorting import check_sorted_permutation
from algobench.generator import generate_dataset, make_rng, sample_points
from algobench.headroom import run_with_headroom
from algobench.models import (
    SCALAR_ARRAY_TYPE,
    Dataset,
    ScalarInput,
    ScalarSweepConfig,
    Shape,
    SortSweepConfig,
    SweepReport,
    TrialFailure,
)
from algobench.timing import TimingRunner

logger = logging.getLogger("algobench.sweep")


def _failure(candidate: Candidate, array_type: str, size: int, exc: BaseException) -> TrialFailure:
    return TrialFailure(
        algorithm=candidate.name,
        array_type=array_type,
        size=size,
        error_type=type(exc).__name__,
        message=str(exc),
    )


class SweepDriver:
    """Runs sweeps against the candidates of one registry.

    Args:
        registry: Candidate source and owner of the memo cache.
        runner: Timing runner (a default ``TimingRunner`` when omitted).
        rng: Random generator for dataset generation (unseeded when omitted).
    """

    def __init__(
        self,
        registry: CandidateRegistry,
        runner: TimingRunner | None = None,
        rng: random.Random | None = None,
    ):
        self.registry = registry
        self.runner = runner if runner is not None else TimingRunner()
        self.rng = rng if rng is not None else make_rng()

    def run_sort_sweep(self, config: SortSweepConfig) -> SweepReport:
        return run_with_headroom(self._sort_sweep, config)

    def _sort_sweep(self, config: SortSweepConfig) -> SweepReport:
        candidates = self.registry.select(SORT_FAMILY, config.candidates)
        shapes = [Shape.parse(s) for s in config.shapes]
        report = SweepReport(expected_trials=len(config.sizes) * len(shapes) * len(candidates))
        logger.info(
            "Sort sweep: sizes=%s shapes=%s candidates=%s (%d trials)",
            ",".join(str(s) for s in config.sizes),
            ",".join(s.value for s in shapes),
            ",".join(c.name for c in candidates),
            report.expected_trials,
        )
        for size in config.sizes:
            for shape in shapes:
                try:
                    dataset = generate_dataset(size, shape, self.rng)
                except Exception as e:
                    logger.warning("Dataset generation failed size=%s shape=%s: %s", size, shape.value, e)
                    report.failures.extend(_failure(c, shape.value, size, e) for c in candidates)
                    continue
                self._run_sort_cell(dataset, candidates, config.verify, report)
        logger.info(
            "Sort sweep finished: %d results, %d failures",
            len(report.results),
            len(report.failures),
        )
        return report

    def _run_sort_cell(
        self,
        dataset: Dataset,
        candidates: Sequence[Candidate],
        verify: bool,
        report: SweepReport,
    ) -> None:
        for candidate in candidates:
            try:
                result = self.runner.run(candidate, dataset)
                if verify:
                    check_sorted_permutation(dataset.values, self.runner.last_output)
            except Exception as e:
                logger.warning(
                    "Trial failed: %s %s size=%d: %s: %s",
                    candidate.name,
                    dataset.shape.value,
                    dataset.size,
                    type(e).__name__,
                    e,
                )
                report.failures.append(_failure(candidate, dataset.shape.value, dataset.size, e))
                continue
            report.results.append(result)
            logger.debug(
                "%s %s size=%d: %.3f ms",
                result.algorithm,
                result.array_type,
                result.size,
                result.time_ms,
            )

    def run_scalar_sweep(self, config: ScalarSweepConfig) -> SweepReport:
        """Time every scalar candidate at each sample point.

        With ``config.reset_memo`` the memo cache is cleared before each sample
        point, so Memoization timings measure a cold computation instead of
        the increment since the previous point.
        """
        return run_with_headroom(self._scalar_sweep, config)

    def _scalar_sweep(self, config: ScalarSweepConfig) -> SweepReport:
        candidates = self.registry.select(SCALAR_FAMILY, config.candidates)
        points = sample_points(config.upper_bound, config.samples)
        report = SweepReport(expected_trials=len(points) * len(candidates))
        logger.info(
            "Scalar sweep: %d points in [1, %d], candidates=%s, reset_memo=%s",
            len(points),
            config.upper_bound,
            ",".join(c.name for c in candidates),
            config.reset_memo,
        )
        for n in points:
            if config.reset_memo:
                self.registry.reset_memo()
            scalar_input = ScalarInput(n)
            for candidate in candidates:
                try:
                    result = self.runner.run(candidate, scalar_input)
                except Exception as e:
                    logger.warning(
                        "Trial failed: %s n=%d: %s: %s", candidate.name, n, type(e).__name__, e
                    )
                    report.failures.append(_failure(candidate, SCALAR_ARRAY_TYPE, n, e))
                    continue
                report.results.append(result)
        logger.info(
            "Scalar sweep finished: %d results, %d failures",
            len(report.results),
            len(report.failures),
        )
        return report
