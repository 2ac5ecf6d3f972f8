"""Tests for the exact binomial tail probability."""

import logging
import math
from fractions import Fraction

import pytest
from mpmath import mpf
from scipy.stats import binom

from restart_sanity.precision import symbol_probability, working_precision
from restart_sanity.tail import SAMPLE_SIZE, tail_probability


def _exact_half_tail(xmax: int) -> Fraction:
    """P(X >= xmax) for Binomial(1000, 1/2) as an exact rational."""
    return Fraction(sum(math.comb(1000, j) for j in range(xmax, 1001)), 2 ** 1000)


class TestTailProbability:
    def test_golden_xmax_50_half(self):
        exact = _exact_half_tail(50)
        with working_precision(2000):
            p = symbol_probability(1.0)
            got = tail_probability(50, p)
            want = mpf(exact.numerator) / mpf(exact.denominator)
            assert abs(got - want) < mpf(10) ** -1900
        # the lower tail below 50 is ~1e-217
        assert 1 - got < mpf(10) ** -200

    def test_golden_upper_tail_half(self):
        exact = _exact_half_tail(600)
        with working_precision(2000):
            got = tail_probability(600, mpf("0.5"))
            want = mpf(exact.numerator) / mpf(exact.denominator)
            assert abs(got - want) <= want * mpf(10) ** -1900

    def test_single_term_at_1000(self):
        with working_precision(2000):
            p = symbol_probability(0.8)
            got = tail_probability(1000, p)
            want = p ** 1000
            assert abs(got - want) <= want * mpf(10) ** -1990
            assert got > 0

    def test_zero_xmax_is_whole_mass(self):
        with working_precision(200):
            for h in (0.1, 0.8, 1.0, 3.5, 8.0):
                got = tail_probability(0, symbol_probability(h))
                assert abs(got - 1) < mpf(10) ** -190

    def test_past_end_is_zero(self):
        with working_precision(50):
            assert tail_probability(SAMPLE_SIZE + 1, mpf("0.3")) == 0

    def test_non_increasing_in_xmax(self):
        # neighbouring tails differ by as little as ~1e-371, so use the full budget
        with working_precision(2000):
            p = symbol_probability(0.8)
            tails = [tail_probability(x, p) for x in (0, 1, 100, 500, 550, 574, 600, 700, 900, 1000, 1001)]
        for a, b in zip(tails, tails[1:]):
            assert a >= b

    def test_sum_never_decreases(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="restart_sanity"):
            with working_precision(60):
                tail_probability(980, mpf("0.7"))
        running = [r.args[1] for r in caplog.records if r.getMessage().startswith("j=")]
        assert len(running) == 21
        assert running == sorted(running, key=float)

    @pytest.mark.parametrize("xmax,h", [(520, 1.0), (600, 0.8), (30, 5.0), (12, 8.0)])
    def test_agrees_with_scipy(self, xmax, h):
        with working_precision(100):
            p = symbol_probability(h)
            got = float(tail_probability(xmax, p))
        want = binom.sf(xmax - 1, 1000, 2.0 ** -h)
        assert got == pytest.approx(want, rel=1e-8)

    def test_rejects_bad_p(self):
        with pytest.raises(ValueError):
            tail_probability(10, mpf(0))
        with pytest.raises(ValueError):
            tail_probability(10, mpf("1.5"))

    def test_p_one(self):
        with working_precision(50):
            assert tail_probability(1000, mpf(1)) == 1
