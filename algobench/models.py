"""Core data structures of the benchmark harness.

This module defines:
    Shape             -- structural category of a generated dataset.
    Dataset           -- immutable input sequence plus its Shape.
    ScalarInput       -- single integer argument for scalar candidates.
    Result            -- timing record of one trial.
    TrialFailure      -- record of a trial that raised instead of finishing.
    SweepReport       -- ordered results and failures of a whole sweep.
    SortSweepConfig   -- trial matrix for the sorting family.
    ScalarSweepConfig -- trial matrix for the scalar family.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from algobench.exceptions import InvalidArgumentError

SCALAR_ARRAY_TYPE = "Scalar"
CSV_HEADER = ("Algorithm", "ArrayType", "Size", "TimeMs")


class Shape(Enum):
    """Dataset shape; the value is the label used in exported rows."""

    RANDOM = "Random"
    SORTED = "Sorted"
    REVERSE_SORTED = "ReverseSorted"
    NEARLY_SORTED = "NearlySorted"

    @classmethod
    def parse(cls, label: "str | Shape") -> "Shape":
        """Accept a member, its label (``ReverseSorted``) or its name (``reverse_sorted``)."""
        if isinstance(label, cls):
            return label
        text = str(label).strip()
        for member in cls:
            if text.lower() in (member.value.lower(), member.name.lower()):
                return member
        raise InvalidArgumentError(f"Unknown shape: {label!r}")


@dataclass(frozen=True)
class Dataset:
    """Immutable generated input.

    Attributes:
        values: The generated integers in order.
        shape: Generation policy that produced ``values``.
    """

    values: tuple[int, ...]
    shape: Shape

    @property
    def size(self) -> int:
        return len(self.values)

    def fresh_copy(self) -> list[int]:
        """Return a new list that no other trial shares."""
        return list(self.values)


@dataclass(frozen=True)
class ScalarInput:
    n: int

    @property
    def array_type(self) -> str:
        return SCALAR_ARRAY_TYPE


@dataclass(frozen=True)
class Result:
    """Timing of exactly one trial.

    Fields:
        algorithm: Candidate name.
        array_type: Shape label, or ``Scalar`` for scalar candidates.
        size: Dataset size or the scalar argument ``n``.
        time_ms: Elapsed wall-clock time in fractional milliseconds.
    """

    algorithm: str
    array_type: str
    size: int
    time_ms: float

    @property
    def trial_key(self) -> tuple[int, str, str]:
        return (self.size, self.array_type, self.algorithm)

    def as_row(self) -> tuple[str, str, int, float]:
        return (self.algorithm, self.array_type, self.size, self.time_ms)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TrialFailure:
    algorithm: str
    array_type: str
    size: int
    error_type: str
    message: str

    @property
    def trial_key(self) -> tuple[int, str, str]:
        return (self.size, self.array_type, self.algorithm)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class SweepReport:
    """Growing log of a sweep. Records are appended, never modified."""

    expected_trials: int = 0
    results: list[Result] = field(default_factory=list)
    failures: list[TrialFailure] = field(default_factory=list)

    @property
    def completed(self) -> int:
        return len(self.results) + len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def extend(self, other: "SweepReport") -> None:
        self.expected_trials += other.expected_trials
        self.results.extend(other.results)
        self.failures.extend(other.failures)

    def to_dict(self) -> dict[str, Any]:
        return {
            "expected_trials": self.expected_trials,
            "completed": self.completed,
            "results": [r.to_dict() for r in self.results],
            "failures": [f.to_dict() for f in self.failures],
        }


DEFAULT_SIZES = (100, 1000, 5000, 10000)


@dataclass(frozen=True)
class SortSweepConfig:
    """Sizes x shapes x sort candidates.

    ``candidates=None`` selects every registered sort candidate.
    """

    sizes: tuple[int, ...] = DEFAULT_SIZES
    shapes: tuple[Shape, ...] = tuple(Shape)
    candidates: tuple[str, ...] | None = None
    verify: bool = True


@dataclass(frozen=True)
class ScalarSweepConfig:
    """Evenly spaced sample points over ``[1, upper_bound]`` x scalar candidates."""

    upper_bound: int = 16000
    samples: int = 40
    candidates: tuple[str, ...] | None = None
    reset_memo: bool = False
