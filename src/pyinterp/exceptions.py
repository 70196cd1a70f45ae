"""Error kinds raised by pyinterp.

All errors derive from a built-in exception type, so callers that already
guard numeric code with ``except ValueError`` or ``except IndexError`` keep
working.
"""

from __future__ import annotations


class OutOfDomainError(ValueError):
    """Query point lies outside the half-open domain ``[a, b)``."""

    def __init__(self, point: float, domain: tuple):
        self.point = point
        self.domain = tuple(domain)
        a, b = self.domain
        super().__init__(f"Point {point} is outside the domain [{a}, {b})")


class FactorialIndexError(IndexError):
    """Factorial requested beyond the capacity of a :class:`FactorialCache`."""

    def __init__(self, n: int, capacity: int):
        self.n = n
        self.capacity = capacity
        super().__init__(
            f"Cannot compute {n}!: factorial cache holds 0..{capacity - 1}"
        )


class InsufficientPointsError(ValueError):
    """Fewer than two sample points requested."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(
            f"Number of points can't be less than 2, got {n} "
            f"(the interval endpoints a and b are always sampled)"
        )
