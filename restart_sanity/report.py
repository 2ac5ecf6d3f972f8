"""Restart test result record and text report."""

from __future__ import annotations

from dataclasses import dataclass

from mpmath import mpf

from restart_sanity.precision import format_mpf

ALPHA = 0.000005

_LABEL_WIDTH = 18
_VALUE_WIDTH = 8


@dataclass(frozen=True)
class RestartResult:
    """Outcome of one restart sanity check."""
    bits_per_symbol: int
    h_i: float
    alpha: float
    p: mpf
    row_max_max: int
    column_max_max: int
    xmax: int
    probability: mpf
    passed: bool

    @property
    def verdict(self) -> str:
        return "PASS" if self.passed else "FAIL"

    @staticmethod
    def pass_from_p(probability: mpf, threshold: float = ALPHA) -> bool:
        return probability >= mpf(threshold)


def _row(label: str, value: object) -> str:
    return f"{label + ' = ':>{_LABEL_WIDTH}}{str(value):>{_VALUE_WIDTH}}"


def render_report(result: RestartResult) -> str:
    lines = [
        "",
        "    ---- Results -----",
        _row("Bits per symbol", result.bits_per_symbol),
        _row("H_I", result.h_i),
        _row("alpha", f"{result.alpha:f}"),
        _row("p", format_mpf(result.p)),
        _row("row_max_max", result.row_max_max),
        _row("column_max_max", result.column_max_max),
        _row("Xmax", result.xmax),
        _row("P(x => xmax)", format_mpf(result.probability)),
        _row("Result", result.verdict),
    ]
    return "\n".join(lines)
