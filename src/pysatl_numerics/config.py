"""
Numerics Configuration
======================

Defaults for the iterative helpers.

- :func:`numerics_config` returns the settings in effect for the current
  context.
- :func:`configure_numerics` updates the process-wide defaults in place.
- :func:`numerics_options` applies overrides for the duration of a ``with``
  block, visible only to the current thread or task.
- :func:`reset_numerics_config` drops the process-wide defaults so that the
  next access rebuilds them.

Notes
-----
Explicit keyword arguments passed to a helper always take precedence over
the values stored here. :func:`configure_numerics` is process-global and not
synchronised; call it during startup. Scoped overrides live in a
:class:`contextvars.ContextVar` and never touch the process-wide defaults.
"""

from __future__ import annotations

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class NumericsConfig:
    """
    Defaults shared by the iterative helpers.

    Parameters
    ----------
    max_iter : int or None, default None
        Iteration bound for the bisection loops. ``None`` leaves them
        unbounded; they still terminate once the interval collapses at
        floating-point precision.
    series_max_terms : int or None, default None
        Bound on the number of terms summed by
        :func:`pysatl_numerics.series.series_sum`. ``None`` leaves the
        summation unbounded.
    parallel : bool, default False
        Whether :func:`pysatl_numerics.elementwise.at_each` evaluates
        elements on a thread pool.
    max_workers : int or None, default None
        Thread count for parallel evaluation (``None`` lets
        :class:`concurrent.futures.ThreadPoolExecutor` decide).
    """

    max_iter: int | None = None
    series_max_terms: int | None = None
    parallel: bool = False
    max_workers: int | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check the settings.

        Raises
        ------
        ValueError
            If a bound is not a positive integer or ``None``, or ``parallel``
            is not a bool.
        """
        for name in ("max_iter", "series_max_terms", "max_workers"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer or None, got {value!r}")
        if not isinstance(self.parallel, bool):
            raise ValueError(f"parallel must be a bool, got {self.parallel!r}")

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_scoped_config: ContextVar[NumericsConfig | None] = ContextVar(
    "pysatl_numerics_scoped_config", default=None
)


@lru_cache(maxsize=1)
def _default_config() -> NumericsConfig:
    return NumericsConfig()


def numerics_config() -> NumericsConfig:
    """
    Return the settings in effect for the current context.

    Inside a :func:`numerics_options` block this is the scoped copy,
    otherwise the cached process-wide defaults (singleton instance).
    """
    scoped = _scoped_config.get()
    if scoped is not None:
        return scoped
    return _default_config()


def _merged(base: NumericsConfig, overrides: dict[str, Any]) -> NumericsConfig:
    known = {f.name for f in fields(base)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise AttributeError(f"Unknown numerics settings: {', '.join(unknown)}")
    return NumericsConfig(**{**base.as_dict(), **overrides})


def configure_numerics(**overrides: Any) -> NumericsConfig:
    """
    Update the process-wide defaults in place.

    Parameters
    ----------
    **overrides : Any
        Field values of :class:`NumericsConfig`.

    Returns
    -------
    NumericsConfig
        The updated singleton.

    Raises
    ------
    AttributeError
        If an override names an unknown setting.
    ValueError
        If the resulting settings are invalid. The singleton is left
        unchanged in that case.

    Notes
    -----
    Active :func:`numerics_options` blocks keep their own copy and do not
    see this update until they exit.
    """
    config = _default_config()
    _merged(config, overrides)
    for name, value in overrides.items():
        setattr(config, name, value)
    return config


@contextmanager
def numerics_options(**overrides: Any) -> Iterator[NumericsConfig]:
    """
    Apply settings overrides inside a ``with`` block.

    The overrides are stored in a context variable, so other threads and
    tasks keep seeing their own settings, and nested or overlapping blocks
    restore exactly what was in effect when they were entered.
    """
    config = _merged(numerics_config(), overrides)
    token = _scoped_config.set(config)
    try:
        yield config
    finally:
        _scoped_config.reset(token)


def reset_numerics_config() -> None:
    """
    Reset the cached process-wide defaults.
    """
    _default_config.cache_clear()


__all__ = [
    "NumericsConfig",
    "numerics_config",
    "configure_numerics",
    "numerics_options",
    "reset_numerics_config",
]
