"""Recursion headroom for sweeps.

QuickSort on a sorted input and a cold memoized Fibonacci recurse once per
element / term, so the default limit of 1000 frames is far too low. Sweeps
therefore run in a worker thread with a large stack and a raised recursion
limit. Calls made from inside such a worker run directly.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any, Callable, TypeVar

logger = logging.getLogger("algobench.headroom")

RECURSION_LIMIT = 200_000
THREAD_STACK_BYTES = 256 * 1024 * 1024

T = TypeVar("T")

_state = threading.local()


def run_with_headroom(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``fn(*args, **kwargs)`` on a big-stack thread and return its value.

    Exceptions raised by ``fn`` are re-raised in the calling thread.
    """
    if getattr(_state, "active", False):
        return fn(*args, **kwargs)

    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
    outcome: dict[str, Any] = {}

    def target() -> None:
        _state.active = True
        try:
            outcome["value"] = fn(*args, **kwargs)
        except BaseException as e:
            outcome["error"] = e

    try:
        previous = threading.stack_size(THREAD_STACK_BYTES)
    except (ValueError, RuntimeError) as e:
        logger.warning("Could not enlarge thread stack: %s", e)
        previous = None
    try:
        t = threading.Thread(target=target, name="sweep_runner")
        t.start()
    finally:
        # only threads started while the size is set get the big stack
        if previous is not None:
            threading.stack_size(previous)
    t.join()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]
