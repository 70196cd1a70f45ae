"""pyinterp: Finite-difference and Lagrange interpolation on uniform nodes.

Provides the :class:`InterpolationEngine` class for Newton and Gauss
interpolation from a forward-difference table, the :class:`LagrangeBuilder`
class for constructing explicit Lagrange polynomials and measuring their
absolute, relative and theoretical (remainder) error, and the supporting
:class:`Polynomial`, :class:`FiniteDifferenceTable`, :class:`FunctionWrapper`
and :class:`FactorialCache` types.

Example
-------
>>> import math
>>> from pyinterp import InterpolationEngine
>>> def f(x):
...     return x ** 2 - math.sin(math.pi * x)
>>> engine = InterpolationEngine(50, f, (0.4, 0.9), classic_products=True)
>>> abs(engine.interpolate(0.53) - f(0.53)) < 1e-8
True
"""

from pyinterp._version import __version__
from pyinterp.exceptions import (
    FactorialIndexError,
    InsufficientPointsError,
    OutOfDomainError,
)
from pyinterp.factorial import N_MAX, FactorialCache
from pyinterp.finite_difference import FiniteDifferenceTable
from pyinterp.function import FunctionWrapper
from pyinterp.interpolation import Direction, InterpolationEngine
from pyinterp.lagrange import LagrangeBuilder, Record
from pyinterp.polynomial import Polynomial

__all__ = [
    "Direction",
    "FactorialCache",
    "FactorialIndexError",
    "FiniteDifferenceTable",
    "FunctionWrapper",
    "InsufficientPointsError",
    "InterpolationEngine",
    "LagrangeBuilder",
    "N_MAX",
    "OutOfDomainError",
    "Polynomial",
    "Record",
    "__version__",
]
