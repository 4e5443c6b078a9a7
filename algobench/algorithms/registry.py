"""Fixed, ordered collection of benchmark candidates."""

from __future__ import annotations

import logging
from functools import partial
from typing import Iterable

from algobench.algorithms.base import (
    SCALAR_FAMILY,
    SORT_FAMILY,
    Candidate,
    ScalarCandidate,
    SortCandidate,
)
from algobench.algorithms.fibonacci import (
    MemoCache,
    fibonacci_continued_fraction,
    fibonacci_memoization,
    fibonacci_modular,
)
from algobench.algorithms.sorting import gnome_sort, heap_sort, merge_sort, quick_sort
from algobench.exceptions import InvalidArgumentError

logger = logging.getLogger("algobench.registry")

SORT_CANDIDATE_NAMES = ("QuickSort", "MergeSort", "HeapSort", "GnomeSort")
SCALAR_CANDIDATE_NAMES = ("Memoization", "ModularFastDoubling", "ContinuedFraction")


class CandidateRegistry:
    """Owns every candidate plus the memoization cache shared by repeated calls.

    The cache is the only state that survives from one trial to the next.
    ``reset_memo`` gives a sweep a cold cache when cross-trial reuse would
    distort what is being measured.
    """

    def __init__(self, memo_cache: MemoCache | None = None):
        self.memo_cache = memo_cache if memo_cache is not None else MemoCache()
        self.sort_candidates: tuple[SortCandidate, ...] = (
            SortCandidate("QuickSort", quick_sort),
            SortCandidate("MergeSort", merge_sort, stable=True),
            SortCandidate("HeapSort", heap_sort),
            SortCandidate("GnomeSort", gnome_sort),
        )
        self.scalar_candidates: tuple[ScalarCandidate, ...] = (
            ScalarCandidate(
                "Memoization", partial(fibonacci_memoization, cache=self.memo_cache)
            ),
            ScalarCandidate("ModularFastDoubling", fibonacci_modular),
            ScalarCandidate("ContinuedFraction", fibonacci_continued_fraction, exact=False),
        )

    def reset_memo(self) -> None:
        logger.debug("Resetting memo cache (%d entries)", len(self.memo_cache))
        self.memo_cache.reset()

    def family(self, family: str) -> tuple[Candidate, ...]:
        if family == SORT_FAMILY:
            return self.sort_candidates
        if family == SCALAR_FAMILY:
            return self.scalar_candidates
        raise InvalidArgumentError(f"Unknown candidate family: {family!r}")

    def select(self, family: str, names: Iterable[str] | None = None) -> tuple[Candidate, ...]:
        """Resolve configured names to candidates, keeping registry order.

        ``names=None`` selects the whole family.

        Raises:
            InvalidArgumentError: For an unknown family or candidate name.
        """
        candidates = self.family(family)
        if names is None:
            return candidates
        wanted = {self.get(name, family).name for name in names}
        return tuple(c for c in candidates if c.name in wanted)

    def get(self, name: str, family: str | None = None) -> Candidate:
        """Look up one candidate by name, optionally within ``family``."""
        pool = (
            self.family(family)
            if family is not None
            else (*self.sort_candidates, *self.scalar_candidates)
        )
        for candidate in pool:
            if candidate.name == name:
                return candidate
        expected = ", ".join(c.name for c in pool)
        scope = f"{family} candidate" if family is not None else "candidate"
        raise InvalidArgumentError(f"Unknown {scope}: {name!r}; expected one of {expected}")
