"""
Elementwise evaluation of scalar functions.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

import numpy as np

from pysatl_numerics.config import numerics_config

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_numerics.types import FloatArray, ScalarFunc

logger = logging.getLogger(__name__)


def at_each(
    f: ScalarFunc,
    xs: Iterable[float],
    *,
    parallel: bool | None = None,
    max_workers: int | None = None,
) -> FloatArray:
    """
    Evaluate ``f`` at each point of ``xs``.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function. For parallel evaluation it must be pure: no writes
        to shared state and no reliance on evaluation order.
    xs : Iterable[float]
        Evaluation points.
    parallel : bool, optional
        Evaluate on a thread pool. Defaults to the configured
        ``parallel`` setting.
    max_workers : int, optional
        Thread count for parallel evaluation. Defaults to the configured
        ``max_workers`` setting.

    Returns
    -------
    numpy.ndarray
        1D float array with ``out[i] == f(xs[i])``.
    """
    config = numerics_config()
    if parallel is None:
        parallel = config.parallel
    if max_workers is None:
        max_workers = config.max_workers

    points = [float(x) for x in xs]
    res = np.empty(len(points), dtype=np.float64)

    if not parallel or len(points) < 2:
        for i, x in enumerate(points):
            res[i] = f(x)
        return res

    logger.debug("Evaluating %d points on a thread pool (max_workers=%s)", len(points), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # map() yields in submission order, so results land at their own index.
        for i, value in enumerate(pool.map(f, points)):
            res[i] = value
    return res


__all__ = [
    "at_each",
]
