"""Binomial coefficients as mpmath floats."""

from __future__ import annotations

from typing import Iterator

from mpmath import mpf


def choose(n: int, k: int) -> mpf:
    """n choose k via the running product of (n - (k - i)) / i for i = 1..k.

    No factorial is ever formed, so intermediates stay near the size of the
    result.
    """
    if k < 0 or k > n:
        return mpf(0)
    prod = mpf(1)
    for i in range(1, k + 1):
        prod = prod * (mpf(n - (k - i)) / i)
    return prod


def coefficients_from(n: int, k: int) -> Iterator[tuple[int, mpf]]:
    """Yield ``(j, C(n, j))`` for j = k..n.

    Seeded with :func:`choose` and advanced with
    C(n, j+1) = C(n, j) * (n - j) / (j + 1).
    """
    k = max(k, 0)
    if k > n:
        return
    coeff = choose(n, k)
    for j in range(k, n + 1):
        yield j, coeff
        coeff = coeff * (n - j) / (j + 1)
