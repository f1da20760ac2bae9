"""
Bisection Methods
=================

Bracketing searches on scalar functions:

- :func:`bisect` — root of a continuous function ``float -> float``.
- :func:`bisect_bool` — value transition of a step function ``float -> bool``.

Notes
-----
Both methods halve the bracket each step and stop at the latest when the
midpoint collapses onto one of the bounds, which happens after a finite
number of halvings in double precision. An optional iteration bound
(``max_iter`` argument or the ``max_iter`` setting of
:func:`pysatl_numerics.config.numerics_config`) turns runaway searches into
:class:`~pysatl_numerics.errors.ConvergenceError`.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_numerics.config import numerics_config
from pysatl_numerics.errors import BracketError, ConvergenceError
from pysatl_numerics.scalar import sign
from pysatl_numerics.types import Bracket, RootResult

if TYPE_CHECKING:
    from pysatl_numerics.types import PredicateFunc, ScalarFunc

logger = logging.getLogger(__name__)


def _iteration_bound(max_iter: int | None) -> int | None:
    if max_iter is None:
        return numerics_config().max_iter
    if max_iter <= 0:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter}")
    return max_iter


def bisect(
    f: ScalarFunc,
    low: float,
    high: float,
    tolerance: float,
    *,
    max_iter: int | None = None,
) -> RootResult:
    """
    Find ``x`` in ``[low, high]`` such that ``|f(x)| <= tolerance``.

    Parameters
    ----------
    f : Callable[[float], float]
        Function whose root is searched.
    low, high : float
        Bracket; ``f(low)`` and ``f(high)`` must have opposite signs.
    tolerance : float
        Absolute tolerance on ``f(x)``.
    max_iter : int, optional
        Maximum number of halvings. Defaults to the configured
        ``max_iter`` (unbounded unless configured).

    Returns
    -------
    RootResult
        ``(x, True)`` if a root was found. ``(x, False)`` if the bracket
        collapsed at floating-point precision without ``f`` crossing zero
        within tolerance, i.e. ``x`` is an apparent discontinuity.

    Raises
    ------
    BracketError
        If ``f(low)`` and ``f(high)`` have the same sign.
    ConvergenceError
        If the iteration bound is exhausted.
    """
    bound = _iteration_bound(max_iter)

    flow, fhigh = f(low), f(high)
    if -tolerance <= flow <= tolerance:
        return RootResult(low, True)
    if -tolerance <= fhigh <= tolerance:
        return RootResult(high, True)
    if sign(flow) == sign(fhigh):
        raise BracketError(low, high, flow, fhigh)

    it = 0
    while True:
        if bound is not None and it >= bound:
            raise ConvergenceError(
                f"bisection did not converge in {bound} iterations; "
                f"bracket [{low:g}, {high:g}], f values {flow:g}, {fhigh:g}",
                it,
            )
        it += 1

        mid = (high + low) / 2
        fmid = f(mid)
        if -tolerance <= fmid <= tolerance:
            logger.debug("bisect: root %r found after %d iterations", mid, it)
            return RootResult(mid, True)
        if mid == high or mid == low:
            logger.debug(
                "bisect: interval collapsed at %r after %d iterations (f=%r)", mid, it, fmid
            )
            return RootResult(mid, False)
        # NaN and exact zeros outside the tolerance fall through to the high side.
        if sign(fmid) == sign(flow):
            low, flow = mid, fmid
        else:
            high, fhigh = mid, fmid


def bisect_bool(
    f: PredicateFunc,
    low: float,
    high: float,
    xtol: float,
    *,
    max_iter: int | None = None,
) -> Bracket:
    """
    Bisection on a boolean function.

    Parameters
    ----------
    f : Callable[[float], bool]
        Step function; ``f(low)`` and ``f(high)`` must differ.
    low, high : float
        Search interval, ``low < high``.
    xtol : float
        Target bracket width.
    max_iter : int, optional
        Maximum number of halvings. Defaults to the configured
        ``max_iter`` (unbounded unless configured).

    Returns
    -------
    Bracket
        ``(x1, x2)`` inside ``[low, high]`` with ``x1 < x2``,
        ``f(x1) != f(x2)`` and ``x2 - x1 <= xtol``, or the tightest bracket
        representable in double precision if ``xtol`` is smaller than that.

    Raises
    ------
    BracketError
        If ``f(low) == f(high)``.
    ConvergenceError
        If the iteration bound is exhausted.
    """
    bound = _iteration_bound(max_iter)

    flow, fhigh = f(low), f(high)
    if flow == fhigh:
        raise BracketError(low, high, flow, fhigh)

    it = 0
    while True:
        if high - low <= xtol:
            logger.debug("bisect_bool: bracket [%r, %r] after %d iterations", low, high, it)
            return Bracket(low, high)
        mid = (high + low) / 2
        if mid == high or mid == low:
            logger.debug("bisect_bool: interval collapsed at [%r, %r]", low, high)
            return Bracket(low, high)
        if bound is not None and it >= bound:
            raise ConvergenceError(
                f"boolean bisection did not reach xtol={xtol:g} in {bound} iterations; "
                f"bracket [{low:g}, {high:g}]",
                it,
            )
        it += 1

        fmid = f(mid)
        if fmid == flow:
            low, flow = mid, fmid
        else:
            high, fhigh = mid, fmid


__all__ = [
    "bisect",
    "bisect_bool",
]
