"""Lagrange interpolation error tables for x^2 - sin(pi x) on [0.4, 0.9]."""

import math

from pyinterp import LagrangeBuilder


def f(x):
    """x^2 - sin(pi x)"""
    return x ** 2 - math.sin(math.pi * x)


def derivative(n):
    """n-th derivative of f."""
    def nth(x):
        theta = {1: 2.0 * x, 2: 2.0}.get(n, 0.0)
        return theta - math.pi ** n * math.sin(math.pi * x + math.pi / 2 * n)
    return nth


def print_table(header, rows):
    print(" | ".join(f"{h:>12}" for h in header))
    print("-" * (15 * len(header)))
    for row in rows:
        print(" | ".join(f"{v:>12}" for v in row))
    print()


builder = LagrangeBuilder(f, derivative, (0.4, 0.9))
degrees = [3, 5, 10, 15, 20, 30, 40, 50, 60, 70, 80, 90, 100]

for x in [0.53, 0.43, 0.86, 0.67]:
    records = builder.statistics_about_error_in_point(degrees, x)
    print_table(
        ["x", "n", "abs error", "rel error %", "bound"],
        [[x, r.degree, f"{r.absolute_error:.3e}", f"{r.relative_error:.3e}",
          f"{r.lagrange_bound:.3e}"] for r in records],
    )

records = builder.statistics_about_max_error(degrees, verbose=True)
print_table(
    ["n", "abs error", "rel error %", "bound"],
    [[r.degree, f"{r.absolute_error:.3e}", f"{r.relative_error:.3e}",
      f"{r.lagrange_bound:.3e}"] for r in records],
)
