from __future__ import annotations

import sys

import pytest

from algobench.headroom import RECURSION_LIMIT, run_with_headroom


def _depth(n: int) -> int:
    return 0 if n == 0 else 1 + _depth(n - 1)


def test_deep_recursion_runs_on_worker_thread() -> None:
    assert run_with_headroom(_depth, 20_000) == 20_000
    assert sys.getrecursionlimit() >= RECURSION_LIMIT


def test_exceptions_reach_the_caller() -> None:
    def fail() -> None:
        raise KeyError("missing")

    with pytest.raises(KeyError, match="missing"):
        run_with_headroom(fail)


def test_nested_calls_run_inline() -> None:
    assert run_with_headroom(run_with_headroom, _depth, 50) == 50
