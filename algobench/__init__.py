"""Microbenchmark harness for interchangeable sorting and Fibonacci candidates.

Exports the data model, the dataset generator and the sweep entry points.
"""

from algobench.algorithms.registry import CandidateRegistry  # noqa: F401
from algobench.generator import generate_dataset, make_rng, sample_points  # noqa: F401
from algobench.models import (  # noqa: F401
    Dataset,
    Result,
    ScalarInput,
    ScalarSweepConfig,
    Shape,
    SortSweepConfig,
    SweepReport,
    TrialFailure,
)
from algobench.sweep import SweepDriver  # noqa: F401
from algobench.timing import TimingRunner  # noqa: F401

__all__ = [
    "CandidateRegistry",
    "Dataset",
    "Result",
    "ScalarInput",
    "ScalarSweepConfig",
    "Shape",
    "SortSweepConfig",
    "SweepDriver",
    "SweepReport",
    "TimingRunner",
    "TrialFailure",
    "generate_dataset",
    "make_rng",
    "sample_points",
]
