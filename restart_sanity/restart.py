"""The restart sanity check pipeline: load, scan, sum, verdict."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from restart_sanity.log import get_logger
from restart_sanity.matrix import bits_per_symbol, load_matrix, scan_matrix
from restart_sanity.precision import DEFAULT_DIGITS, symbol_probability, working_precision
from restart_sanity.report import ALPHA, RestartResult
from restart_sanity.tail import SAMPLE_SIZE, tail_probability

logger = get_logger(__name__)

DEFAULT_H_I = 0.8


def check_entropy_estimate(h_i: float, bps: int) -> None:
    """H_I must lie in (0, bits per symbol]."""
    if not 0 < h_i <= bps:
        raise ValueError(f"H_I must be in (0, {bps}] for {bps}-bit symbols, got {h_i}")


def run_restart_test(
    matrix: np.ndarray,
    h_i: float = DEFAULT_H_I,
    digits: int = DEFAULT_DIGITS,
) -> RestartResult:
    """Run the restart sanity check on an in-memory 1000x1000 matrix."""
    bps = bits_per_symbol(matrix)
    logger.debug("Bits per symbol = %d", bps)
    check_entropy_estimate(h_i, bps)

    scan = scan_matrix(matrix)
    logger.debug(
        "row_max_max=%d column_max_max=%d Xmax=%d",
        scan.row_max_max, scan.column_max_max, scan.xmax,
    )

    with working_precision(digits):
        p = symbol_probability(h_i)
        probability = tail_probability(scan.xmax, p, SAMPLE_SIZE)
        passed = RestartResult.pass_from_p(probability, ALPHA)

    return RestartResult(
        bits_per_symbol=bps,
        h_i=h_i,
        alpha=ALPHA,
        p=p,
        row_max_max=scan.row_max_max,
        column_max_max=scan.column_max_max,
        xmax=scan.xmax,
        probability=probability,
        passed=passed,
    )


def run_restart_file(
    path: str | Path,
    h_i: float = DEFAULT_H_I,
    digits: int = DEFAULT_DIGITS,
) -> RestartResult:
    """Load a restart matrix file and run the check on it."""
    logger.debug("Reading binary data from file: %s", path)
    matrix = load_matrix(path)
    return run_restart_test(matrix, h_i=h_i, digits=digits)
