"""Pytest configuration & custom summary hook.

Also ensures the project root is on sys.path and gives the sorting routines,
called directly outside a sweep, enough recursion headroom.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so 'import algobench' works without install
_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# QuickSort on a sorted list of 1000 recurses 1000 levels deep
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10_000))

from algobench.algorithms.registry import CandidateRegistry  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def registry() -> CandidateRegistry:
    return CandidateRegistry()


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a compact custom summary at the end of test session."""
    stats = terminalreporter.stats
    collected = terminalreporter._numcollected  # type: ignore[attr-defined]
    passed = len(stats.get("passed", []))
    failed = len(stats.get("failed", []))
    errors = len(stats.get("error", []))
    skipped = len(stats.get("skipped", []))

    terminalreporter.section("Benchmark harness test summary", sep="=")
    terminalreporter.write_line(
        f"Collected: {collected} | Passed: {passed} | Failed: {failed} | "
        f"Errors: {errors} | Skipped: {skipped}"
    )
    if failed:
        terminalreporter.write_line("Failed tests:")
        for rep in stats["failed"]:
            terminalreporter.write_line(f"  - {rep.nodeid}")
