"""Triangular table of forward differences of uniformly spaced samples.

Row 0 holds the samples ``f(a + i*h)``, ``i = 0 .. n-1`` with
``h = (b - a) / (n - 1)``; row ``k`` holds the ``n - k`` forward differences
of row ``k - 1``. Each row is a fixed-size, read-only numpy array, and all
index access goes through :meth:`FiniteDifferenceTable.__getitem__`, which
clamps columns past the end of a row to that row's last entry.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from pyinterp.exceptions import InsufficientPointsError
from pyinterp.function import FunctionWrapper


def _difference_rows(samples: np.ndarray) -> List[np.ndarray]:
    """Build every row of the pyramid from the row-0 *samples*."""
    rows = [samples]
    for _ in range(1, len(samples)):
        prev = rows[-1]
        rows.append(prev[1:] - prev[:-1])
    for row in rows:
        row.flags.writeable = False
    return rows


class FiniteDifferenceTable:
    """Forward-difference pyramid of a function sampled at uniform nodes.

    Parameters
    ----------
    n_nodes : int
        Number of nodes (>= 2), including both domain endpoints.
    function : FunctionWrapper
        Function and domain to sample.

    Attributes
    ----------
    nodes : ndarray or None
        Sample abscissas; None for tables created by :meth:`from_values`.
    step : float or None
        Node spacing ``h``; None for tables created by :meth:`from_values`.

    Examples
    --------
    >>> f = FunctionWrapper(lambda x: x ** 2, (0.0, 3.0))
    >>> table = FiniteDifferenceTable(4, f)
    >>> table.row(1).tolist()
    [1.0, 3.0, 5.0]
    >>> table[2, 5]
    2.0
    """

    def __init__(self, n_nodes: int, function: FunctionWrapper):
        if n_nodes < 2:
            raise InsufficientPointsError(n_nodes)
        a, b = function.domain_tuple()
        self.step: float | None = (b - a) / (n_nodes - 1)
        self.nodes: np.ndarray | None = a + np.arange(n_nodes) * self.step
        samples = np.array([function(x) for x in self.nodes], dtype=float)
        self._rows = _difference_rows(samples)

    @classmethod
    def from_values(cls, values) -> "FiniteDifferenceTable":
        """Create a table from pre-computed samples at uniformly spaced nodes.

        Parameters
        ----------
        values : array_like of shape (n,)
            Function values, ``n >= 1``.

        Raises
        ------
        ValueError
            If *values* is empty, not one-dimensional, or contains NaN or Inf.
        """
        samples = np.array(values, dtype=float)
        if samples.ndim != 1 or samples.size == 0:
            raise ValueError(
                f"values must be a non-empty 1-D sequence, got shape {samples.shape}"
            )
        if not np.isfinite(samples).all():
            raise ValueError("values contains NaN or Inf")
        obj = object.__new__(cls)
        obj.step = None
        obj.nodes = None
        obj._rows = _difference_rows(samples)
        return obj

    def degree(self) -> int:
        """Number of rows, equal to the number of samples."""
        return len(self._rows)

    def row(self, k: int) -> np.ndarray:
        """Copy of row *k* (the ``k``-th forward differences)."""
        if k < 0:
            raise IndexError(f"row index must be non-negative, got {k}")
        return self._rows[k].copy()

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        if row < 0 or col < 0:
            raise IndexError(f"table indices must be non-negative, got ({row}, {col})")
        data = self._rows[row]
        if col < len(data):
            return float(data[col])
        return float(data[-1])

    def __repr__(self) -> str:
        return f"FiniteDifferenceTable(degree={self.degree()})"

    def __str__(self) -> str:
        return "\n".join(
            "\t".join(f"{v:.2e}" for v in row) for row in self._rows
        )
