"""Candidate contracts shared by the registry, the timing runner and the sweep.

A candidate splits a trial into an untimed ``prepare`` step (copying or
validating the input) and the timed ``invoke`` step, so the runner measures
only the algorithm itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, MutableSequence

from algobench.exceptions import InvalidArgumentError
from algobench.models import Dataset, ScalarInput

SORT_FAMILY = "sort"
SCALAR_FAMILY = "scalar"


@dataclass(frozen=True)
class SortCandidate:
    """``sort(seq)`` in place; output is a non-decreasing permutation of the input.

    Attributes:
        name: Label written to results (``QuickSort``...).
        sort_fn: In-place routine from ``algobench.algorithms.sorting``.
        stable: Whether equal keys keep their relative order.
    """

    family: ClassVar[str] = SORT_FAMILY

    name: str
    sort_fn: Callable[[MutableSequence[int]], None]
    stable: bool = False

    def sort(self, seq: MutableSequence[int]) -> None:
        if len(seq) == 0:
            raise InvalidArgumentError(f"{self.name}: cannot sort an empty sequence")
        self.sort_fn(seq)

    def prepare(self, dataset: Dataset) -> list[int]:
        if not isinstance(dataset, Dataset):
            raise InvalidArgumentError(
                f"{self.name} expects a Dataset, got {type(dataset).__name__}"
            )
        return dataset.fresh_copy()

    def invoke(self, work: list[int]) -> list[int]:
        self.sort(work)
        return work


@dataclass(frozen=True)
class ScalarCandidate:
    """``evaluate(n)`` for a non-negative integer ``n``.

    ``exact`` is False for approximations whose value may drift from the
    exact term at large ``n``.
    """

    family: ClassVar[str] = SCALAR_FAMILY

    name: str
    evaluate_fn: Callable[[int], int]
    exact: bool = True

    def evaluate(self, n: int) -> int:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgumentError(f"{self.name}: n must be a non-negative int, got {n!r}")
        return self.evaluate_fn(n)

    def prepare(self, scalar_input: ScalarInput) -> int:
        if not isinstance(scalar_input, ScalarInput):
            raise InvalidArgumentError(
                f"{self.name} expects a ScalarInput, got {type(scalar_input).__name__}"
            )
        return scalar_input.n

    def invoke(self, n: int) -> int:
        return self.evaluate(n)


Candidate = SortCandidate | ScalarCandidate
