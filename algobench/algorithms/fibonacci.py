"""Scalar candidates: three ways of computing the n-th Fibonacci number.

Memoization
    Recursive, exact. The cache lives in a ``MemoCache`` owned by the caller
    (normally the registry) and persists across calls, so a call for ``n``
    after a call for ``m < n`` only recurses ``n - m`` levels. Timings of a
    sweep with ascending ``n`` therefore measure incremental work unless the
    cache is reset between sample points. A cold call recurses ``n`` levels.
Modular
    2x2 matrix power ``[[1, 1], [1, 0]] ** (n - 1)`` by squaring, every
    product reduced modulo ``modulus``. O(log n) multiplications.
Continued fraction
    The golden ratio is approximated with ``n`` steps of the recurrence
    ``x <- 1 + 1/x`` (its continued fraction ``[1; 1, 1, ...]``) and the term
    is recovered with Binet's formula ``round(x**n / sqrt(5))``. The recurrence
    runs in floats; the power is taken in ``decimal`` (28 significant digits,
    exponents up to 999999) so ``n`` far beyond the float range still yields a
    value. Exact only up to roughly ``n = 70``, after that the leading ~16
    digits are right and the rest is noise.
"""

from __future__ import annotations

import decimal

from algobench.exceptions import ArithmeticOverflowError, InvalidArgumentError

FIB_MODULUS = 1_000_000_007
_BINET_CONTEXT = decimal.Context(prec=28, Emax=999_999, Emin=-999_999)

Matrix = tuple[int, int, int, int]  # row-major (a, b, c, d)


def _check_n(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"n must be non-negative, got {n}")


class MemoCache:
    """Explicit memoization store for ``fibonacci_memoization``."""

    def __init__(self) -> None:
        self._values: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, n: object) -> bool:
        return n in self._values

    def get(self, n: int) -> int | None:
        return self._values.get(n)

    def put(self, n: int, value: int) -> None:
        self._values[n] = value

    def reset(self) -> None:
        self._values.clear()


def _memo_fib(n: int, cache: MemoCache) -> int:
    if n <= 1:
        return n
    cached = cache.get(n)
    if cached is not None:
        return cached
    value = _memo_fib(n - 1, cache) + _memo_fib(n - 2, cache)
    cache.put(n, value)
    return value


def fibonacci_memoization(n: int, cache: MemoCache) -> int:
    _check_n(n)
    return _memo_fib(n, cache)


def _mat_mult(x: Matrix, y: Matrix, modulus: int) -> Matrix:
    a, b, c, d = x
    e, f, g, h = y
    return (
        (a * e + b * g) % modulus,
        (a * f + b * h) % modulus,
        (c * e + d * g) % modulus,
        (c * f + d * h) % modulus,
    )


def _mat_pow(base: Matrix, exponent: int, modulus: int) -> Matrix:
    result: Matrix = (1, 0, 0, 1)
    while exponent > 0:
        if exponent & 1:
            result = _mat_mult(result, base, modulus)
        base = _mat_mult(base, base, modulus)
        exponent >>= 1
    return result


def fibonacci_modular(n: int, modulus: int = FIB_MODULUS) -> int:
    """F(n) mod ``modulus`` via exponentiation by squaring."""
    _check_n(n)
    if modulus < 2:
        raise InvalidArgumentError(f"modulus must be >= 2, got {modulus}")
    if n == 0:
        return 0
    return _mat_pow((1, 1, 1, 0), n - 1, modulus)[0] % modulus


def golden_ratio_convergent(steps: int) -> float:
    """Value of ``[1; 1, 1, ...]`` truncated after ``steps`` iterations."""
    x = 1.0
    for _ in range(steps):
        x = 1.0 + 1.0 / x
    return x


def fibonacci_continued_fraction(n: int, context: decimal.Context | None = None) -> int:
    """Approximate F(n).

    Raises ``ArithmeticOverflowError`` when ``x**n`` exceeds the exponent range
    of ``context`` (default: ``n`` of roughly 4.7 million).
    """
    _check_n(n)
    if n <= 1:
        return n
    ctx = context or _BINET_CONTEXT
    phi = golden_ratio_convergent(n)
    try:
        power = ctx.power(decimal.Decimal(phi), n)
        value = ctx.divide(power, ctx.sqrt(decimal.Decimal(5)))
    except decimal.Overflow as e:
        raise ArithmeticOverflowError(
            f"continued fraction approximation overflows for n={n}"
        ) from e
    return int(value.to_integral_value(context=ctx))
