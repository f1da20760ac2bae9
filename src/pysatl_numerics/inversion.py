"""
Quantile Inversion
==================

Percent-point function (inverse CDF) of a monotone scalar CDF, computed by
bracket expansion followed by :func:`pysatl_numerics.roots.bisect_bool`.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from math import inf, isnan, nan
from typing import TYPE_CHECKING

from pysatl_numerics.errors import BracketError
from pysatl_numerics.roots import bisect_bool

if TYPE_CHECKING:
    from pysatl_numerics.types import PredicateFunc, ScalarFunc

logger = logging.getLogger(__name__)


def _expand_bracket(
    predicate: PredicateFunc,
    x0: float,
    init_step: float,
    expand_factor: float,
    max_expand: int,
) -> tuple[float, float]:
    step = init_step
    L = x0 - step
    R = x0 + step
    PL, PR = predicate(L), predicate(R)

    for _ in range(max_expand):
        if not PL and PR:
            return L, R
        if PL:
            step *= expand_factor
            L -= step
            PL = predicate(L)
        if not PR:
            step *= expand_factor
            R += step
            PR = predicate(R)

    if not PL and PR:
        return L, R
    raise BracketError(L, R, PL, PR)


def ppf_from_cdf(
    cdf: ScalarFunc,
    q: float,
    *,
    most_left: bool = False,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
    x_tol: float = 1e-12,
) -> float:
    """
    Invert a monotone CDF at level ``q``.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Non-decreasing CDF ``R -> [0, 1]``.
    q : float
        Probability level.
    most_left : bool, default False
        If ``True``, return the leftmost point with ``cdf(x) >= q``;
        otherwise the rightmost point with ``cdf(x) <= q``. The two differ on
        flat CDF plateaus.
    x0 : float, default 0.0
        Initial bracket center.
    init_step : float, default 1.0
        Initial half-width of the bracket.
    expand_factor : float, default 2.0
        Multiplicative factor for exponential bracket growth.
    max_expand : int, default 60
        Maximum number of bracket expansions.
    x_tol : float, default 1e-12
        Relative tolerance in ``x``; the absolute bracket width target is
        ``x_tol * (1 + max(|L|, |R|))`` for the expanded bracket ``[L, R]``.

    Returns
    -------
    float
        Quantile ``x`` with ``cdf(x) ≈ q``. ``q <= 0`` maps to ``-inf``,
        ``q >= 1`` maps to ``+inf`` and NaN maps to NaN.

    Raises
    ------
    ValueError
        If ``init_step`` is not positive, ``expand_factor`` is not greater
        than 1, or ``max_expand`` is negative.
    BracketError
        If no bracket containing the level was found within
        ``max_expand`` expansions.
    """
    if not init_step > 0.0:
        raise ValueError(f"init_step must be positive, got {init_step!r}")
    if not expand_factor > 1.0:
        raise ValueError(f"expand_factor must be greater than 1, got {expand_factor!r}")
    if max_expand < 0:
        raise ValueError(f"max_expand must be non-negative, got {max_expand!r}")

    if isnan(q):
        return nan
    if q <= 0.0:
        return -inf
    if q >= 1.0:
        return inf

    def predicate(x: float) -> bool:
        value = float(cdf(x))
        return value >= q if most_left else value > q

    L, R = _expand_bracket(predicate, x0, init_step, expand_factor, max_expand)
    xtol = x_tol * (1.0 + max(abs(L), abs(R)))
    x1, x2 = bisect_bool(predicate, L, R, xtol)
    logger.debug("ppf_from_cdf: q=%r bracketed by [%r, %r]", q, x1, x2)
    return x2 if most_left else x1


__all__ = [
    "ppf_from_cdf",
]
