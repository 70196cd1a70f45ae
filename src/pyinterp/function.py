"""Scalar function paired with its half-open domain."""

from __future__ import annotations

import math
from typing import Callable, Tuple


class FunctionWrapper:
    """Immutable pairing of a scalar callable with a domain ``[a, b)``.

    Calling the wrapper evaluates the callable directly; domain membership is
    not checked on evaluation; use :meth:`contains` (or ``x in wrapper``).

    Parameters
    ----------
    function : callable
        Scalar function ``f(x) -> float``.
    domain : (float, float)
        Bounds ``(a, b)`` with ``a < b``. The upper bound is exclusive.

    Examples
    --------
    >>> f = FunctionWrapper(lambda x: x * x, (0.0, 2.0))
    >>> f(1.5)
    2.25
    >>> 2.0 in f
    False
    """

    __slots__ = ("_function", "_domain")

    def __init__(self, function: Callable[[float], float], domain: Tuple[float, float]):
        if not callable(function):
            raise TypeError(f"function must be callable, got {type(function).__name__}")
        a, b = domain
        a, b = float(a), float(b)
        if not (math.isfinite(a) and math.isfinite(b)):
            raise ValueError(f"domain bounds must be finite, got [{a}, {b})")
        if a >= b:
            raise ValueError(f"domain: a={a} must be strictly less than b={b}")
        object.__setattr__(self, "_function", function)
        object.__setattr__(self, "_domain", (a, b))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def function(self) -> Callable[[float], float]:
        """The wrapped callable."""
        return self._function

    @property
    def domain(self) -> Tuple[float, float]:
        """Half-open interval bounds ``(a, b)``."""
        return self._domain

    def domain_tuple(self) -> Tuple[float, float]:
        return self._domain

    def contains(self, x: float) -> bool:
        """Return True if ``a <= x < b``."""
        a, b = self._domain
        return a <= x < b

    def __contains__(self, x: float) -> bool:
        return self.contains(x)

    def evaluate(self, x):
        return self._function(x)

    def __call__(self, x):
        return self._function(x)

    def __repr__(self) -> str:
        a, b = self._domain
        name = getattr(self._function, "__name__", type(self._function).__name__)
        return f"FunctionWrapper({name}, domain=[{a}, {b}))"
