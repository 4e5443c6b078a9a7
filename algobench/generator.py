"""Dataset generation policies.

Every function that needs randomness takes an explicit ``random.Random`` so a
seeded run is reproducible and two runs never share generator state.
"""

from __future__ import annotations

import random

from algobench.exceptions import InvalidArgumentError
from algobench.models import Dataset, Shape


def make_rng(seed: int | None = None) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgumentError(f"size must be an int, got {type(size).__name__}")
    if size <= 0:
        raise InvalidArgumentError(f"size must be positive, got {size}")


def random_values(size: int, rng: random.Random) -> list[int]:
    """Uniform draws from ``[-2*size, 2*size)``."""
    return [rng.randrange(-2 * size, 2 * size) for _ in range(size)]


def nearly_sorted_values(size: int, rng: random.Random) -> list[int]:
    """Ascending ``0..size-1`` with ``size // 10`` random pair swaps.

    Both indices of a swap are drawn independently, so ``i == j`` is allowed
    and leaves the list unchanged.
    """
    values = list(range(size))
    for _ in range(size // 10):
        i = rng.randrange(size)
        j = rng.randrange(size)
        values[i], values[j] = values[j], values[i]
    return values


def generate_dataset(size: int, shape: Shape, rng: random.Random) -> Dataset:
    """Generate one dataset of the requested size and shape.

    Args:
        size: Number of elements, must be positive.
        shape: Generation policy.
        rng: Random generator (only consumed by ``RANDOM`` and ``NEARLY_SORTED``).

    Returns:
        Immutable ``Dataset``.

    Raises:
        InvalidArgumentError: If ``size`` is not a positive int or ``shape`` is unknown.
    """
    _check_size(size)
    shape = Shape.parse(shape)
    if shape is Shape.RANDOM:
        values = random_values(size, rng)
    elif shape is Shape.SORTED:
        values = list(range(size))
    elif shape is Shape.REVERSE_SORTED:
        values = list(range(size - 1, -1, -1))
    else:
        values = nearly_sorted_values(size, rng)
    return Dataset(values=tuple(values), shape=shape)


def sample_points(upper_bound: int, samples: int) -> list[int]:
    """Evenly spaced integer sample points over ``[1, upper_bound]``.

    The i-th point is ``1 + i * (upper_bound - 1) // (samples - 1)``, so the
    first point is always 1 and the last is ``upper_bound``. More samples
    than integers in the domain would repeat points and is rejected.
    """
    if upper_bound < 1:
        raise InvalidArgumentError(f"upper_bound must be >= 1, got {upper_bound}")
    if samples < 1:
        raise InvalidArgumentError(f"samples must be >= 1, got {samples}")
    if samples > upper_bound:
        raise InvalidArgumentError(
            f"samples ({samples}) cannot exceed upper_bound ({upper_bound})"
        )
    if samples == 1:
        return [1]
    return [1 + i * (upper_bound - 1) // (samples - 1) for i in range(samples)]
