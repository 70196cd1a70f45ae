"""Memoized factorials for the interpolation and error-bound formulas."""

from __future__ import annotations

from typing import List, Optional

from pyinterp.exceptions import FactorialIndexError

N_MAX = 102


class FactorialCache:
    """Fixed-capacity, lazily filled table of ``n!`` as floats.

    Parameters
    ----------
    capacity : int, optional
        Number of slots; ``fact(n)`` is defined for ``0 <= n < capacity``.
        Default is :data:`N_MAX`.

    Examples
    --------
    >>> cache = FactorialCache()
    >>> cache.fact(5)
    120.0
    >>> cache[4]
    24.0
    >>> cache[10] is None
    True
    """

    def __init__(self, capacity: int = N_MAX):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._values: List[Optional[float]] = [None] * capacity
        self._values[0] = 1.0

    @property
    def capacity(self) -> int:
        return len(self._values)

    def fact(self, n: int) -> float:
        """Return ``n!``, computing and memoizing missing entries below it.

        Raises
        ------
        FactorialIndexError
            If ``n`` is negative or not below the capacity.
        """
        if n < 0 or n >= self.capacity:
            raise FactorialIndexError(n, self.capacity)
        cached = self._values[n]
        if cached is not None:
            return cached

        # Entries are filled monotonically, so walk down to the highest one.
        k = n - 1
        while self._values[k] is None:
            k -= 1
        value = self._values[k]
        for m in range(k + 1, n + 1):
            value = m * value
            self._values[m] = value
        return value

    def __getitem__(self, n: int) -> Optional[float]:
        """Return the memoized ``n!`` or None if it has not been computed."""
        if n < 0 or n >= self.capacity:
            raise FactorialIndexError(n, self.capacity)
        return self._values[n]

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self) -> str:
        filled = sum(v is not None for v in self._values)
        return f"FactorialCache(capacity={self.capacity}, filled={filled})"
