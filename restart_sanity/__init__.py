"""
restart-sanity: SP800-90B restart sanity check.

Scans a 1000x1000 restart matrix for the largest per-row and per-column
symbol repeat count, then computes the exact binomial tail probability of
that count under a claimed min-entropy with arbitrary-precision arithmetic.
"""

__version__ = "0.2.0"
__author__ = "Amenti Labs"

from restart_sanity.matrix import bits_per_symbol, load_matrix, scan_matrix
from restart_sanity.report import ALPHA, RestartResult, render_report
from restart_sanity.restart import run_restart_file, run_restart_test
from restart_sanity.tail import tail_probability

__all__ = [
    "ALPHA",
    "RestartResult",
    "bits_per_symbol",
    "load_matrix",
    "render_report",
    "run_restart_file",
    "run_restart_test",
    "scan_matrix",
    "tail_probability",
    "__version__",
]
