"""
Binomial Coefficients
=====================

Exact binomial coefficients for small arguments and log-gamma based
approximations for large ones.

- :func:`small_factorials` — table of exact factorials ``0! .. 20!``.
- :func:`lchoose` — natural logarithm of ``C(n, k)``.
- :func:`choose` — integer ``C(n, k)``.

Notes
-----
``20!`` is the largest factorial that fits in a signed 64-bit integer.
Coefficients with ``n`` above that limit are computed as
``exp(lchoose(n, k))`` rounded to the nearest integer; they are a
best-effort approximation carrying double precision rounding error, not
exact values.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import lru_cache

from scipy.special import gammaln

SMALL_FACTORIAL_LIMIT = 20
"""Largest ``n`` whose factorial is kept in the exact table (20! needs 62 bits)."""


@lru_cache(maxsize=1)
def small_factorials() -> tuple[int, ...]:
    """
    Return the table of exact factorials ``0! .. SMALL_FACTORIAL_LIMIT!``.

    The table is built once, on first use, and is immutable afterwards.

    Returns
    -------
    tuple[int, ...]
        ``table[i] == i!`` for ``i`` in ``[0, SMALL_FACTORIAL_LIMIT]``.
    """
    table = [1]
    fact = 1
    for n in range(1, SMALL_FACTORIAL_LIMIT + 1):
        fact *= n
        table.append(fact)
    return tuple(table)


def lchoose(n: int, k: int) -> float:
    """
    Natural logarithm of the binomial coefficient ``C(n, k)``.

    Parameters
    ----------
    n : int
        Population size, ``n >= 0``.
    k : int
        Selection size, ``0 <= k <= n``.

    Returns
    -------
    float
        ``lgamma(n + 1) - lgamma(k + 1) - lgamma(n - k + 1)``.

    Notes
    -----
    Arguments outside ``0 <= k <= n`` produce an unspecified value; the
    caller is responsible for the domain.
    """
    a = gammaln(float(n + 1))
    b = gammaln(float(k + 1))
    c = gammaln(float(n - k + 1))
    return float(a - b - c)


def choose(n: int, k: int) -> int:
    """
    Binomial coefficient ``C(n, k)``.

    Parameters
    ----------
    n : int
        Population size.
    k : int
        Selection size.

    Returns
    -------
    int
        ``1`` if ``k == 0`` or ``k == n``; ``0`` if ``k < 0`` or ``k > n``;
        the exact coefficient for ``n <= SMALL_FACTORIAL_LIMIT``; otherwise
        ``exp(lchoose(n, k))`` rounded to the nearest integer.

    Raises
    ------
    OverflowError
        If ``n > SMALL_FACTORIAL_LIMIT`` and the coefficient exceeds the
        double precision range.

    Notes
    -----
    Impossible selections return ``0`` instead of raising.
    """
    if k == 0 or k == n:
        return 1
    if k < 0 or n < k:
        return 0
    if n <= SMALL_FACTORIAL_LIMIT:
        # Product of the k largest factors of n!, never n! itself.
        numer = 1
        for n1 in range(n - (k - 1), n + 1):
            numer *= n1
        return numer // small_factorials()[k]

    return int(math.exp(lchoose(n, k)) + 0.5)


__all__ = [
    "SMALL_FACTORIAL_LIMIT",
    "small_factorials",
    "lchoose",
    "choose",
]
