"""Dense univariate polynomials with ring arithmetic.

Coefficients are stored lowest order first: ``Polynomial([1, -2, 1])`` is
``1 - 2x + x^2``. Instances are immutable value objects; every operator
returns a new polynomial.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from pyinterp._algebra import _as_coefficients, _is_scalar, _padded_sum


class Polynomial:
    """Polynomial ``sum_i c[i] * x**i`` over the reals.

    Parameters
    ----------
    coefficients : sequence of float, optional
        Coefficients in increasing order of power. Empty (the default)
        gives the zero polynomial ``[0]``.

    Examples
    --------
    >>> p = Polynomial([1, -2, 1])
    >>> p(3)
    4.0
    >>> (p * Polynomial([-1, 1])).degree
    3
    """

    __array_ufunc__ = None  # keep ``ndarray * Polynomial`` on our operators

    def __init__(self, coefficients=()):
        self._coefficients = _as_coefficients(coefficients)
        self._coefficients.flags.writeable = False

    @classmethod
    def zeros(cls, degree: int) -> "Polynomial":
        """Zero polynomial with ``degree + 1`` coefficient slots."""
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        return cls(np.zeros(degree + 1))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Polynomial":
        # Skip validation for arrays produced by our own arithmetic.
        obj = object.__new__(cls)
        data.flags.writeable = False
        obj._coefficients = data
        return obj

    @property
    def degree(self) -> int:
        """Number of coefficients minus one (leading zeros are kept)."""
        return len(self._coefficients) - 1

    @property
    def coefficients(self) -> np.ndarray:
        """Copy of the coefficient array, lowest order first."""
        return self._coefficients.copy()

    def evaluate(self, x):
        """Evaluate the polynomial at *x* (scalar or array) by Horner's rule."""
        x = np.asarray(x, dtype=float)
        result = np.zeros_like(x)
        for c in self._coefficients[::-1]:
            result = result * x + c
        if result.ndim == 0:
            return float(result)
        return result

    def __call__(self, x):
        return self.evaluate(x)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> float:
        return float(self._coefficients[index])

    def __len__(self) -> int:
        return len(self._coefficients)

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._coefficients)

    # ------------------------------------------------------------------
    # Arithmetic operators
    # ------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self._coefficients, other._coefficients
        if len(a) < len(b):
            a, b = b, a
        return Polynomial._wrap(_padded_sum(a, b))

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __neg__(self):
        return self * -1.0

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return Polynomial._wrap(
                np.convolve(self._coefficients, other._coefficients)
            )
        if not _is_scalar(other):
            return NotImplemented
        return Polynomial._wrap(self._coefficients * float(other))

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Polynomial division by zero")
        return self.__mul__(1.0 / float(scalar))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coefficients, other._coefficients)

    def __hash__(self):
        return hash(tuple(self._coefficients.tolist()))

    def allclose(self, other: "Polynomial", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """Coefficient-wise comparison within tolerance; shorter operand is zero-padded."""
        a, b = self._coefficients, other._coefficients
        if len(a) < len(b):
            a, b = b, a
        padded = np.zeros_like(a)
        padded[: len(b)] = b
        return bool(np.allclose(a, padded, rtol=rtol, atol=atol))

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()})"

    def __str__(self) -> str:
        terms = []
        for power, c in enumerate(self._coefficients):
            if c == 0 and len(self._coefficients) > 1:
                continue
            if power == 0:
                terms.append(f"{c:g}")
            elif power == 1:
                terms.append(f"{c:g}*x")
            else:
                terms.append(f"{c:g}*x^{power}")
        return " + ".join(terms) if terms else "0"
