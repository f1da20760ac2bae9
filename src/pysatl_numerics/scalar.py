"""
Scalar helpers used by the root finders and by distribution code.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import nan
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def sign(x: float) -> float:
    """
    Return the sign of ``x``.

    Parameters
    ----------
    x : float
        Input value.

    Returns
    -------
    float
        ``-1.0`` if ``x < 0``, ``0.0`` if ``x == 0`` (including ``-0.0``),
        ``1.0`` if ``x > 0`` and NaN if ``x`` is NaN.
    """
    if x == 0:
        return 0.0
    if x < 0:
        return -1.0
    if x > 0:
        return 1.0
    return nan


def max_int(a: int, b: int) -> int:
    return a if a > b else b


def min_int(a: int, b: int) -> int:
    return a if a < b else b


def sum_int(xs: Iterable[int]) -> int:
    """Sum of integers; ``0`` for an empty input."""
    total = 0
    for x in xs:
        total += x
    return total


__all__ = [
    "sign",
    "max_int",
    "min_int",
    "sum_int",
]
