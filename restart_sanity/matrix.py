"""Restart matrix loading and row/column frequency scanning.

The input is the one-symbol-per-byte restart format of SP800-90B: 1000
restarts of 1000 symbols each, stored row-major as exactly 1,000,000 bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from restart_sanity.log import get_logger

logger = get_logger(__name__)

ROWS = 1000
COLUMNS = 1000
MATRIX_BYTES = ROWS * COLUMNS


class ShortReadError(OSError):
    """Restart data is not exactly ``MATRIX_BYTES`` long."""

    def __init__(self, got: int, source: str = "") -> None:
        where = f" from {source}" if source else ""
        super().__init__(f"read {got} bytes{where}, need exactly {MATRIX_BYTES}")
        self.got = got


@dataclass(frozen=True)
class FrequencyScan:
    """Largest per-line symbol counts from one row pass and one column pass."""

    row_max_max: int
    column_max_max: int

    @property
    def xmax(self) -> int:
        if self.column_max_max > self.row_max_max:
            return self.column_max_max
        return self.row_max_max


def matrix_from_bytes(data: bytes, source: str = "") -> np.ndarray:
    """Interpret *data* as a row-major 1000x1000 uint8 matrix (read-only)."""
    if len(data) != MATRIX_BYTES:
        raise ShortReadError(len(data), source)
    matrix = np.frombuffer(data, dtype=np.uint8).reshape(ROWS, COLUMNS)
    matrix.flags.writeable = False
    return matrix


def load_matrix(path: str | Path) -> np.ndarray:
    """Read a restart matrix file.

    Raises the native ``OSError`` if the file cannot be opened and
    :class:`ShortReadError` if it does not hold exactly 1,000,000 bytes.
    """
    path = Path(path)
    with open(path, "rb") as f:
        # one byte past the end so oversized files are caught too
        data = f.read(MATRIX_BYTES + 1)
    logger.debug("read %d/%d symbols from %s", len(data), MATRIX_BYTES, path)
    return matrix_from_bytes(data, str(path))


def bits_per_symbol(matrix: np.ndarray) -> int:
    """Smallest width in 1..8 bits that covers the OR of every symbol."""
    bigor = int(np.bitwise_or.reduce(np.asarray(matrix, dtype=np.uint8), axis=None))
    return max(bigor.bit_length(), 1)


def line_max(line: np.ndarray) -> int:
    """Largest count of any one symbol value within a single row or column."""
    frequency = np.bincount(np.asarray(line, dtype=np.uint8), minlength=256)
    return int(frequency.max())


def row_max_max(matrix: np.ndarray) -> int:
    best = 0
    for row in matrix:
        best = max(best, line_max(row))
    return best


def column_max_max(matrix: np.ndarray) -> int:
    best = 0
    for column in matrix.T:
        best = max(best, line_max(column))
    return best


def scan_matrix(matrix: np.ndarray) -> FrequencyScan:
    """Row pass then column pass over the full matrix."""
    matrix = np.asarray(matrix, dtype=np.uint8)
    if matrix.shape != (ROWS, COLUMNS):
        raise ValueError(f"restart matrix must be {ROWS}x{COLUMNS}, got {matrix.shape}")
    logger.debug("Counting row and column symbol maximums")
    return FrequencyScan(row_max_max=row_max_max(matrix), column_max_max=column_max_max(matrix))
