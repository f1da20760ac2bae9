from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.special import ndtr, ndtri

from pysatl_numerics.errors import BracketError
from pysatl_numerics.inversion import ppf_from_cdf


def uniform_cdf(a: float, b: float):
    def cdf(x: float) -> float:
        return min(max((x - a) / (b - a), 0.0), 1.0)

    return cdf


def plateau_cdf(x: float) -> float:
    if x < 1.0:
        return 0.0
    if x < 2.0:
        return 0.5
    return 1.0


class TestPpfFromCdf:
    @pytest.mark.parametrize("q", [0.01, 0.25, 0.5, 0.9])
    def test_uniform(self, q):
        assert ppf_from_cdf(uniform_cdf(0.0, 1.0), q) == pytest.approx(q, abs=1e-9)

    @pytest.mark.parametrize("q", [0.001, 0.3, 0.975])
    def test_standard_normal(self, q):
        result = ppf_from_cdf(lambda x: float(ndtr(x)), q)
        assert result == pytest.approx(float(ndtri(q)), abs=1e-9)

    def test_far_support_requires_expansion(self):
        assert ppf_from_cdf(uniform_cdf(100.0, 101.0), 0.5) == pytest.approx(100.5, abs=1e-9)

    def test_negative_support(self):
        assert ppf_from_cdf(uniform_cdf(-50.0, -40.0), 0.2) == pytest.approx(-48.0, abs=1e-9)

    @pytest.mark.parametrize(
        "q, expected",
        [(0.0, -math.inf), (-0.5, -math.inf), (1.0, math.inf), (1.5, math.inf)],
        ids=["zero", "negative", "one", "above_one"],
    )
    def test_tail_levels(self, q, expected):
        assert ppf_from_cdf(uniform_cdf(0.0, 1.0), q) == expected

    def test_nan_level(self):
        assert math.isnan(ppf_from_cdf(uniform_cdf(0.0, 1.0), math.nan))

    def test_plateau_leftmost(self):
        assert ppf_from_cdf(plateau_cdf, 0.5, most_left=True) == pytest.approx(1.0, abs=1e-9)

    def test_plateau_rightmost(self):
        assert ppf_from_cdf(plateau_cdf, 0.5) == pytest.approx(2.0, abs=1e-9)

    def test_unbracketable_level_raises(self):
        with pytest.raises(BracketError):
            ppf_from_cdf(lambda x: 0.0, 0.5, max_expand=5)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"init_step": 0.0},
            {"init_step": -1.0},
            {"init_step": math.nan},
            {"expand_factor": 1.0},
            {"expand_factor": 0.5},
            {"max_expand": -1},
        ],
        ids=[
            "zero_step",
            "negative_step",
            "nan_step",
            "unit_factor",
            "shrinking_factor",
            "negative_expand",
        ],
    )
    def test_invalid_expansion_arguments(self, kwargs):
        calls: list[float] = []

        def cdf(x: float) -> float:
            calls.append(x)
            return min(max(x, 0.0), 1.0)

        with pytest.raises(ValueError):
            ppf_from_cdf(cdf, 0.5, **kwargs)
        assert calls == []

    def test_invalid_arguments_are_not_bracket_errors(self):
        with pytest.raises(ValueError) as excinfo:
            ppf_from_cdf(uniform_cdf(0.0, 1.0), 0.5, expand_factor=1.0)
        assert not isinstance(excinfo.value, BracketError)
