"""Exact binomial tail probability P(X >= Xmax) for the restart test."""

from __future__ import annotations

import logging

from mpmath import mpf

from restart_sanity.combinatorics import coefficients_from
from restart_sanity.log import get_logger
from restart_sanity.precision import format_mpf

logger = get_logger(__name__)

SAMPLE_SIZE = 1000


def tail_probability(xmax: int, p: mpf, n: int = SAMPLE_SIZE) -> mpf:
    """Sum C(n, j) * p^j * (1-p)^(n-j) over j = xmax..n.

    Evaluated entirely at the current mpmath precision; wrap the call in
    :func:`restart_sanity.precision.working_precision` to choose it.
    ``xmax <= 0`` sums the whole mass (1 within precision) and
    ``xmax > n`` gives 0.
    """
    p = mpf(p)
    if not 0 < p <= 1:
        raise ValueError(f"p must be in (0, 1], got {p}")

    q = 1 - p
    trace = logger.isEnabledFor(logging.DEBUG)
    if trace:
        logger.debug("Computing P(X >= Xmax) for Xmax=%d, n=%d", xmax, n)

    bigp = mpf(0)
    for j, first in coefficients_from(n, xmax):
        second = p ** j
        third = q ** (n - j)
        increment = first * second * third
        bigp += increment
        if trace:
            logger.debug(
                "j=%5d  bigp=%s  bigp_increment=%s  choose(%d,%4d)=%s  pow(p,%4d)=%s  pow(1-p,%d)=%s",
                j, format_mpf(bigp), format_mpf(increment), n, j, format_mpf(first),
                j, format_mpf(second), n - j, format_mpf(third),
            )
    return bigp
