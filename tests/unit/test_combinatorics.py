from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import lru_cache

import pytest
from scipy.special import comb

from pysatl_numerics.combinatorics import (
    SMALL_FACTORIAL_LIMIT,
    choose,
    lchoose,
    small_factorials,
)


@lru_cache(maxsize=None)
def pascal(n: int, k: int) -> int:
    if k == 0 or k == n:
        return 1
    return pascal(n - 1, k - 1) + pascal(n - 1, k)


SMALL_PAIRS = [(n, k) for n in range(SMALL_FACTORIAL_LIMIT + 1) for k in range(n + 1)]


class TestFactorialTable:
    def test_table_holds_exact_factorials(self):
        table = small_factorials()
        assert len(table) == SMALL_FACTORIAL_LIMIT + 1
        assert all(table[i] == math.factorial(i) for i in range(SMALL_FACTORIAL_LIMIT + 1))

    def test_table_fits_signed_64_bit(self):
        assert small_factorials()[-1] < 2**63

    def test_table_is_built_once(self):
        assert small_factorials() is small_factorials()
        assert isinstance(small_factorials(), tuple)


class TestChoose:
    def test_matches_pascal_triangle(self):
        for n, k in SMALL_PAIRS:
            assert choose(n, k) == pascal(n, k), (n, k)

    @pytest.mark.parametrize("n", [0, 1, 5, 20, 21, 60, 1000])
    def test_edges_are_one(self, n):
        assert choose(n, 0) == 1
        assert choose(n, n) == 1

    @pytest.mark.parametrize(
        "n, k",
        [(5, -1), (5, 6), (0, 1), (30, 31), (30, -2)],
        ids=["negative_k", "k_above_n", "empty_population", "large_k_above_n", "large_negative_k"],
    )
    def test_impossible_selection_is_zero(self, n, k):
        assert choose(n, k) == 0

    def test_returns_int(self):
        assert isinstance(choose(20, 10), int)
        assert isinstance(choose(40, 20), int)

    def test_largest_exact_value(self):
        assert choose(20, 10) == 184756

    @pytest.mark.parametrize("n, k", [(21, 3), (30, 15), (50, 25), (100, 7)])
    def test_large_n_is_close_to_exact(self, n, k):
        assert choose(n, k) == pytest.approx(math.comb(n, k), rel=1e-9)

    def test_small_large_n_values_round_exactly(self):
        assert choose(21, 1) == 21
        assert choose(25, 2) == 300

    def test_overflowing_value_raises(self):
        with pytest.raises(OverflowError):
            choose(2000, 1000)


class TestLChoose:
    def test_exp_matches_choose(self):
        for n, k in SMALL_PAIRS:
            assert math.exp(lchoose(n, k)) == pytest.approx(choose(n, k), rel=1e-9), (n, k)

    @pytest.mark.parametrize("n, k", [(100, 50), (1000, 10), (5000, 2500)])
    def test_matches_scipy_for_large_arguments(self, n, k):
        expected = math.log(comb(n, k, exact=True))
        assert lchoose(n, k) == pytest.approx(expected, rel=1e-12)

    def test_returns_python_float(self):
        assert type(lchoose(10, 3)) is float
