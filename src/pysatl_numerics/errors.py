"""
Exceptions raised by the numerical helpers.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class NumericsError(Exception):
    """Base class for errors raised by :mod:`pysatl_numerics`."""


class BracketError(NumericsError, ValueError):
    """
    The search interval does not bracket a root or a value transition.

    This is a usage error: the caller passed bounds that violate the
    precondition of a bracketing method. Retrying with the same bounds
    cannot succeed.
    """

    def __init__(self, low: float, high: float, f_low: object, f_high: object) -> None:
        self.low = low
        self.high = high
        self.f_low = f_low
        self.f_high = f_high
        super().__init__(
            f"root of f is not bracketed by [low, high]; "
            f"f({low:g})={_fmt(f_low)} f({high:g})={_fmt(f_high)}"
        )


class ConvergenceError(NumericsError, RuntimeError):
    """An iterative method exhausted its iteration bound or produced NaN."""

    def __init__(self, message: str, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(message)


def _fmt(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


__all__ = [
    "NumericsError",
    "BracketError",
    "ConvergenceError",
]
