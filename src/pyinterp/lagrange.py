"""Explicit Lagrange interpolation polynomials and their error statistics.

:class:`LagrangeBuilder` constructs the interpolating polynomial through
``n`` uniformly spaced samples symbolically, as a :class:`Polynomial`, and
compares it with the original function three ways:

- absolute error ``||P_n - f||``;
- relative error ``||P_n - f|| / ||f||`` in percent;
- the Lagrange remainder estimate ``||f^(n)|| / n! * (b - a)^n``.

Norms are either the value at a given point or an approximate sup-norm
obtained by scanning the interval with a fixed step.
"""

from __future__ import annotations

import math
import time
import warnings
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from pyinterp.exceptions import InsufficientPointsError
from pyinterp.factorial import N_MAX, FactorialCache
from pyinterp.function import FunctionWrapper
from pyinterp.polynomial import Polynomial

DEFAULT_NORM_STEP = 1e-4


@dataclass(frozen=True)
class Record:
    """Error statistics of the Lagrange interpolant through ``degree`` points."""

    degree: int
    absolute_error: float
    relative_error: float
    lagrange_bound: float

    @property
    def n(self) -> int:
        return self.degree


class LagrangeBuilder:
    """Builds Lagrange interpolants of a function and measures their error.

    Parameters
    ----------
    function : callable or FunctionWrapper
        Scalar function ``f(x) -> float``.
    derivative : callable
        Derivative generator: ``derivative(k)`` returns a callable computing
        the ``k``-th derivative of *function*.
    interval : (float, float), optional
        Interval ``[a, b]`` to sample. Taken from *function* when it is a
        :class:`FunctionWrapper`.
    norm_step : float, optional
        Scan step for the approximate sup-norm. Default is ``1e-4``.
    factorial_capacity : int, optional
        Size of the factorial cache; bounds the largest usable ``n``.

    Examples
    --------
    >>> import math
    >>> builder = LagrangeBuilder(
    ...     math.exp, lambda k: math.exp, (0.0, 1.0))
    >>> builder.calculate_points(3).tolist()
    [0.0, 0.5, 1.0]
    >>> rec = builder.statistics_about_error_in_point([5], 0.3)[0]
    >>> rec.absolute_error < rec.lagrange_bound
    True
    """

    def __init__(
        self,
        function: Callable[[float], float] | FunctionWrapper,
        derivative: Callable[[int], Callable[[float], float]],
        interval: Tuple[float, float] | None = None,
        *,
        norm_step: float = DEFAULT_NORM_STEP,
        factorial_capacity: int = N_MAX,
    ):
        if isinstance(function, FunctionWrapper):
            if interval is None:
                interval = function.domain
            function = function.function
        if interval is None:
            raise ValueError("interval is required when function is a plain callable")
        a, b = float(interval[0]), float(interval[1])
        if a >= b:
            raise ValueError(f"interval: a={a} must be strictly less than b={b}")
        if not norm_step > 0:
            raise ValueError(f"norm_step must be positive, got {norm_step}")

        self.function = function
        self.derivative = derivative
        self.interval = (a, b)
        self.norm_step = float(norm_step)
        self.factorials = FactorialCache(factorial_capacity)
        self._polynomials: Dict[int, Polynomial] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def calculate_points(self, n: int) -> np.ndarray:
        """Return *n* uniformly spaced points over the interval, endpoints included.

        Raises
        ------
        InsufficientPointsError
            If ``n <= 1``.
        """
        if n <= 1:
            raise InsufficientPointsError(n)
        a, b = self.interval
        step = (b - a) / (n - 1)
        return a + step * np.arange(n)

    def lagrange_polynomial(self, n: int) -> Polynomial:
        """Interpolating polynomial of degree ``n - 1`` through *n* sample points.

        Built as ``sum_i f(x_i) prod_{j != i} (x - x_j) / (x_i - x_j)``.
        Results are memoized per *n*.
        """
        cached = self._polynomials.get(n)
        if cached is not None:
            return cached

        points = self.calculate_points(n)
        total = Polynomial()
        for i, xi in enumerate(points):
            basis = Polynomial([self.function(xi)])
            for j, xj in enumerate(points):
                if i != j:
                    basis = basis * (Polynomial([-xj, 1.0]) / (xi - xj))
            total = total + basis

        self._polynomials[n] = total
        return total

    # ------------------------------------------------------------------
    # Norms and errors
    # ------------------------------------------------------------------

    def _scan_points(self) -> np.ndarray:
        a, b = self.interval
        count = max(int(math.ceil((b - a) / self.norm_step)), 1)
        return np.minimum(a + self.norm_step * np.arange(1, count + 1), b)

    def norm_of_function(self, func: Callable[[float], float], point: float | None = None) -> float:
        """Return ``|func(point)|``, or an approximate sup-norm of *func*.

        Without *point*, *func* is sampled at ``a + k * norm_step`` for
        ``k = 1, 2, ...`` up to ``b`` and the largest magnitude is returned.
        The result is a lower bound on the true supremum that tightens as
        ``norm_step`` shrinks.
        """
        if point is not None:
            return abs(float(func(point)))
        values = np.array([func(float(x)) for x in self._scan_points()], dtype=float)
        return float(np.max(np.abs(values)))

    def absolute_error(self, n: int, point: float | None = None) -> float:
        """Norm of ``P_n - f`` for the interpolant through *n* points."""
        polynomial = self.lagrange_polynomial(n)
        return self.norm_of_function(
            lambda x: polynomial(x) - self.function(x), point
        )

    def relative_error(self, n: int, point: float | None = None) -> float:
        """Absolute error divided by the norm of *f*, in percent."""
        abs_error = self.absolute_error(n, point)
        norm = self.norm_of_function(self.function, point)
        if norm == 0:
            warnings.warn(
                f"Function norm is zero (point={point}); relative error is undefined",
                RuntimeWarning,
                stacklevel=2,
            )
            return math.nan if abs_error == 0 else math.inf
        return abs_error / norm * 100

    def lagrange_error_bound(self, n: int, point: float | None = None) -> float:
        """Lagrange remainder estimate ``||f^(n)|| / n! * (b - a)^n``.

        Raises
        ------
        FactorialIndexError
            If *n* exceeds the factorial cache capacity.
        """
        a, b = self.interval
        factorial = self.factorials.fact(n)
        nth_derivative = self.derivative(n)
        return self.norm_of_function(nth_derivative, point) / factorial * (b - a) ** n

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def _record(self, n: int, point: float | None) -> Record:
        return Record(
            degree=n,
            absolute_error=self.absolute_error(n, point),
            relative_error=self.relative_error(n, point),
            lagrange_bound=self.lagrange_error_bound(n, point),
        )

    def _statistics(self, degrees: Sequence[int], point: float | None,
                    verbose: bool) -> List[Record]:
        start = time.time()
        records = []
        for k, n in enumerate(degrees):
            records.append(self._record(n, point))
            if verbose:
                print(f"  Degree {k + 1}/{len(degrees)}: n={n}, "
                      f"abs={records[-1].absolute_error:.3e}")
        if verbose:
            print(f"Statistics complete in {time.time() - start:.3f}s")
        return records

    def statistics_about_max_error(self, degrees: Sequence[int],
                                   verbose: bool = False) -> List[Record]:
        """Sup-norm error statistics for each node count in *degrees*."""
        return self._statistics(degrees, None, verbose)

    def statistics_about_error_in_point(self, degrees: Sequence[int], point: float,
                                        verbose: bool = False) -> List[Record]:
        """Error statistics at *point* for each node count in *degrees*."""
        return self._statistics(degrees, point, verbose)

    def __repr__(self) -> str:
        a, b = self.interval
        return (
            f"LagrangeBuilder(interval=[{a}, {b}], "
            f"norm_step={self.norm_step}, "
            f"cached={sorted(self._polynomials)})"
        )
