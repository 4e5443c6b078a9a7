"""Exception hierarchy shared by the generator, candidates and sweep driver."""

from __future__ import annotations

__all__ = (
    "ArithmeticOverflowError",
    "BenchmarkError",
    "ConfigurationError",
    "InvalidArgumentError",
    "VerificationError",
)


class BenchmarkError(Exception):
    """Base exception for everything raised by ``algobench``."""


class InvalidArgumentError(BenchmarkError, ValueError):
    """Bad size, bad ``n``, empty sequence or unknown shape / candidate name."""


class ArithmeticOverflowError(BenchmarkError, OverflowError):
    """A floating point candidate left the representable range."""


class VerificationError(BenchmarkError, AssertionError):
    """Sort output is not a non-decreasing permutation of its input."""


class ConfigurationError(BenchmarkError):
    """Malformed benchmark configuration file."""
