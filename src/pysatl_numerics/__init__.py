"""
PySATL Numerics
===============

Numerical helper algorithms for statistical distribution code: sign and
integer helpers, binomial coefficients, bisection root finders, series
summation, elementwise evaluation and quantile inversion.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from importlib.metadata import version

from .combinatorics import *
from .combinatorics import __all__ as _comb_all
from .config import *
from .config import __all__ as _config_all
from .elementwise import *
from .elementwise import __all__ as _elementwise_all
from .errors import *
from .errors import __all__ as _errors_all
from .inversion import *
from .inversion import __all__ as _inversion_all
from .roots import *
from .roots import __all__ as _roots_all
from .scalar import *
from .scalar import __all__ as _scalar_all
from .series import *
from .series import __all__ as _series_all
from .types import *
from .types import __all__ as _types_all

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = version("pysatl-numerics")
__all__ = [
    "__version__",
    *_comb_all,
    *_config_all,
    *_elementwise_all,
    *_errors_all,
    *_inversion_all,
    *_roots_all,
    *_scalar_all,
    *_series_all,
    *_types_all,
]

del _comb_all
del _config_all
del _elementwise_all
del _errors_all
del _inversion_all
del _roots_all
del _scalar_all
del _series_all
del _types_all
