"""Candidate contracts and the registry that owns them."""

from __future__ import annotations

import random

import pytest

from algobench.algorithms.base import ScalarCandidate, SortCandidate
from algobench.algorithms.fibonacci import MemoCache
from algobench.algorithms.registry import (
    SCALAR_CANDIDATE_NAMES,
    SORT_CANDIDATE_NAMES,
    CandidateRegistry,
)
from algobench.exceptions import InvalidArgumentError
from algobench.generator import generate_dataset
from algobench.models import Dataset, ScalarInput, Shape


def test_registry_order_and_families(registry: CandidateRegistry) -> None:
    assert tuple(c.name for c in registry.sort_candidates) == SORT_CANDIDATE_NAMES
    assert tuple(c.name for c in registry.scalar_candidates) == SCALAR_CANDIDATE_NAMES
    assert all(c.family == "sort" for c in registry.sort_candidates)
    assert all(c.family == "scalar" for c in registry.scalar_candidates)
    stable = [c.name for c in registry.sort_candidates if c.stable]
    assert stable == ["MergeSort"]
    inexact = [c.name for c in registry.scalar_candidates if not c.exact]
    assert inexact == ["ContinuedFraction"]


def test_select_keeps_registry_order(registry: CandidateRegistry) -> None:
    chosen = registry.select("sort", ["GnomeSort", "QuickSort"])
    assert [c.name for c in chosen] == ["QuickSort", "GnomeSort"]
    assert registry.select("scalar") == registry.scalar_candidates


def test_select_rejects_unknown_names(registry: CandidateRegistry) -> None:
    with pytest.raises(InvalidArgumentError, match="BogoSort"):
        registry.select("sort", ["QuickSort", "BogoSort"])
    with pytest.raises(InvalidArgumentError):
        registry.select("graph")
    with pytest.raises(InvalidArgumentError):
        registry.get("Nope")
    # names resolve within their own family only
    with pytest.raises(InvalidArgumentError, match="sort candidate: 'Memoization'"):
        registry.select("sort", ["Memoization"])
    assert registry.get("Memoization", "scalar").name == "Memoization"


def test_sort_candidate_rejects_empty_sequence(registry: CandidateRegistry) -> None:
    for candidate in registry.sort_candidates:
        with pytest.raises(InvalidArgumentError):
            candidate.sort([])


def test_sort_candidate_prepare_gives_independent_copies(registry: CandidateRegistry) -> None:
    dataset = Dataset((4, 3, 2, 1, 0), Shape.REVERSE_SORTED)
    merge = registry.get("MergeSort")
    first = merge.prepare(dataset)
    second = merge.prepare(dataset)
    assert first is not second
    assert merge.invoke(first) == [0, 1, 2, 3, 4]
    assert second == [4, 3, 2, 1, 0]
    assert dataset.values == (4, 3, 2, 1, 0)


def test_same_candidate_twice_gives_identical_output(registry: CandidateRegistry) -> None:
    dataset = generate_dataset(300, Shape.RANDOM, random.Random(5))
    for candidate in registry.sort_candidates:
        out_a = candidate.invoke(candidate.prepare(dataset))
        out_b = candidate.invoke(candidate.prepare(dataset))
        assert out_a == out_b == sorted(dataset.values)


def test_candidates_reject_wrong_input_kind(registry: CandidateRegistry) -> None:
    with pytest.raises(InvalidArgumentError):
        registry.get("HeapSort").prepare(ScalarInput(3))  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        registry.get("Memoization").prepare(Dataset((1,), Shape.SORTED))  # type: ignore[arg-type]


def test_scalar_candidates_agree_at_ten(registry: CandidateRegistry) -> None:
    values = {c.name: c.evaluate(10) for c in registry.scalar_candidates}
    assert values == {"Memoization": 55, "ModularFastDoubling": 55, "ContinuedFraction": 55}


def test_scalar_candidate_rejects_negative_n(registry: CandidateRegistry) -> None:
    for candidate in registry.scalar_candidates:
        with pytest.raises(InvalidArgumentError):
            candidate.evaluate(-3)


def test_memo_cache_owned_by_registry() -> None:
    cache = MemoCache()
    registry = CandidateRegistry(memo_cache=cache)
    registry.get("Memoization").evaluate(20)
    assert len(cache) == 19
    registry.reset_memo()
    assert len(cache) == 0
    # another registry does not share the cache
    other = CandidateRegistry()
    other.get("Memoization").evaluate(20)
    assert len(cache) == 0


def test_custom_candidates_follow_contract() -> None:
    builtin = SortCandidate("Builtin", lambda seq: seq.sort(), stable=True)
    assert builtin.invoke([3, 1, 2]) == [1, 2, 3]
    square = ScalarCandidate("Square", lambda n: n * n)
    assert square.invoke(square.prepare(ScalarInput(9))) == 81
