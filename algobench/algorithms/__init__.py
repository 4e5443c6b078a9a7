"""Benchmark candidates.

Contains:
- Sorting routines (QuickSort, MergeSort, HeapSort, GnomeSort)
- Fibonacci routines (Memoization, ModularFastDoubling, ContinuedFraction)
- The candidate contracts and the registry holding them
"""

from algobench.algorithms.base import ScalarCandidate, SortCandidate
from algobench.algorithms.fibonacci import (
    FIB_MODULUS,
    MemoCache,
    fibonacci_continued_fraction,
    fibonacci_memoization,
    fibonacci_modular,
)
from algobench.algorithms.registry import CandidateRegistry
from algobench.algorithms.sorting import (
    check_sorted_permutation,
    gnome_sort,
    heap_sort,
    merge_sort,
    quick_sort,
)

__all__ = [
    "FIB_MODULUS",
    "CandidateRegistry",
    "MemoCache",
    "ScalarCandidate",
    "SortCandidate",
    "check_sorted_permutation",
    "fibonacci_continued_fraction",
    "fibonacci_memoization",
    "fibonacci_modular",
    "gnome_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
]
