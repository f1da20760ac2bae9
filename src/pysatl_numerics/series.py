"""
Infinite series summation.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from math import isnan
from typing import TYPE_CHECKING

from pysatl_numerics.config import numerics_config
from pysatl_numerics.errors import ConvergenceError

if TYPE_CHECKING:
    from pysatl_numerics.types import ScalarFunc

logger = logging.getLogger(__name__)


def series_sum(f: ScalarFunc, *, max_terms: int | None = None) -> float:
    """
    Sum the series ``f(0) + f(1) + f(2) + ...``.

    Summation stops at the first term that leaves the running sum unchanged
    under floating-point addition.

    Parameters
    ----------
    f : Callable[[float], float]
        Term function, called with ``n = 0.0, 1.0, 2.0, ...``.
    max_terms : int, optional
        Maximum number of terms. Defaults to the configured
        ``series_max_terms`` (unbounded unless configured).

    Returns
    -------
    float
        The accumulated sum.

    Raises
    ------
    ConvergenceError
        If ``max_terms`` terms were added without reaching a fixed point, or
        the running sum became NaN.

    Notes
    -----
    This is fast but subject to round-off error. Only rapidly converging
    series may be passed: with no bound configured, a divergent or slowly
    converging series never terminates.
    """
    if max_terms is None:
        max_terms = numerics_config().series_max_terms
    elif max_terms <= 0:
        raise ValueError(f"max_terms must be a positive integer, got {max_terms}")

    y, yp = 0.0, 1.0
    n = 0
    while y != yp:
        if max_terms is not None and n >= max_terms:
            raise ConvergenceError(
                f"series did not reach a fixed point after {max_terms} terms (sum={y:g})", n
            )
        yp = y
        y += f(float(n))
        n += 1
        if isnan(y):
            raise ConvergenceError(f"series sum became NaN at term {n - 1}", n)

    logger.debug("series_sum: fixed point %r after %d terms", y, n)
    return y


__all__ = [
    "series_sum",
]
