"""Timing runner: one candidate, one input, one ``Result``.

The input is prepared (copied / validated) before the clock starts; the
clock brackets exactly the candidate call. Nothing is retried and no timeout
is enforced: an exception from the candidate propagates to the caller, which
decides whether the rest of the sweep goes on.
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable

from algobench.algorithms.base import Candidate
from algobench.models import Dataset, Result, ScalarInput

logger = logging.getLogger("algobench.timing")


class TimingRunner:
    """Times single trials.

    Args:
        clock: Monotonic clock returning seconds as float.
        disable_gc: Collect and disable the garbage collector around the
            timed call; the previous collector state is restored afterwards.
        slow_trial_ms: Report trials slower than this at WARNING level. The
            trial itself is not interrupted.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        disable_gc: bool = False,
        slow_trial_ms: float | None = None,
    ):
        self.clock = clock
        self.disable_gc = disable_gc
        self.slow_trial_ms = slow_trial_ms
        self.last_output: Any = None

    def run(self, candidate: Candidate, data: Dataset | ScalarInput) -> Result:
        """Prepare ``data`` for ``candidate``, time the call and build the record."""
        if isinstance(data, Dataset):
            array_type, size = data.shape.value, data.size
        else:
            array_type, size = data.array_type, data.n
        work = candidate.prepare(data)

        gc_was_enabled = gc.isenabled()
        if self.disable_gc:
            gc.collect()
            gc.disable()
        try:
            t0 = self.clock()
            output = candidate.invoke(work)
            t1 = self.clock()
        finally:
            if self.disable_gc and gc_was_enabled:
                gc.enable()

        self.last_output = output
        elapsed_ms = max(0.0, (t1 - t0) * 1000.0)
        if self.slow_trial_ms is not None and elapsed_ms > self.slow_trial_ms:
            logger.warning(
                "Slow trial: %s %s size=%d took %.3f ms (threshold %.3f ms)",
                candidate.name,
                array_type,
                size,
                elapsed_ms,
                self.slow_trial_ms,
            )
        return Result(
            algorithm=candidate.name,
            array_type=array_type,
            size=size,
            time_ms=elapsed_ms,
        )
