"""
Core Type Definitions
=====================

Type aliases and small result records shared by the numerical helpers.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.float64]
"""Type alias for double precision arrays."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

PredicateFunc = Callable[[float], bool]
"""Type alias for boolean step functions (float -> bool)."""


@dataclass(frozen=True, slots=True)
class RootResult:
    """
    Outcome of a continuous bisection search.

    Parameters
    ----------
    root : float
        Located point. When ``converged`` is False this is the point of an
        apparent discontinuity.
    converged : bool
        Whether ``|f(root)|`` is within the requested tolerance.

    Notes
    -----
    Unpacks as ``x, found = bisect(...)``.
    """

    root: float
    converged: bool

    def __iter__(self) -> Iterator[Any]:
        yield self.root
        yield self.converged


@dataclass(frozen=True, slots=True)
class Bracket:
    """
    Interval ``[low, high]`` containing a value transition of a step function.

    Parameters
    ----------
    low : float
        Left end of the interval.
    high : float
        Right end of the interval.
    """

    low: float
    high: float

    @property
    def width(self) -> float:
        """Interval width ``high - low``."""
        return self.high - self.low

    @property
    def midpoint(self) -> float:
        return (self.high + self.low) / 2

    def __iter__(self) -> Iterator[float]:
        yield self.low
        yield self.high


__all__ = [
    "FloatArray",
    "ScalarFunc",
    "PredicateFunc",
    "RootResult",
    "Bracket",
]
