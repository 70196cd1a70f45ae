"""
Compare truncated vs classic Newton/Gauss products against a global interpolant.

InterpolationEngine multiplies i - 1 offset factors into the order-i term by
default; classic_products=True uses the textbook i factors. This script
measures both against scipy's BarycentricInterpolator on the same nodes and
against the exact function, for increasing node counts.

Tests:
1. Max error over a fine grid for n = 10, 20, 50, 100
2. Error at the sample points 0.43, 0.53, 0.67, 0.86 (n = 50)

Requires: scipy

Usage:
    python compare_product_conventions.py

NOTE: This script is for local benchmarking only. It is NOT part of the
test suite.
"""

import math
import time

import numpy as np
from scipy.interpolate import BarycentricInterpolator

from pyinterp import InterpolationEngine

DOMAIN = (0.4, 0.9)
SAMPLE_POINTS = [0.43, 0.53, 0.67, 0.86]


def f(x):
    """x^2 - sin(pi x)"""
    return x ** 2 - math.sin(math.pi * x)


def _grid(n_points=500):
    a, b = DOMAIN
    return np.linspace(a, b, n_points, endpoint=False)


def _report(title, header, rows):
    print(f"\n{'=' * 70}")
    print(f"  {title}")
    print(f"{'=' * 70}")
    print("  " + " ".join(f"{h:>14}" for h in header))
    print(f"  {'-' * (15 * len(header))}")
    for row in rows:
        print("  " + " ".join(f"{v:>14}" for v in row))


def test_1_max_error():
    """Test 1: max error over a grid, both conventions vs barycentric."""
    grid = _grid()
    exact = np.array([f(x) for x in grid])
    rows = []
    for n in (10, 20, 50, 100):
        truncated = InterpolationEngine(n, f, DOMAIN)
        classic = InterpolationEngine(n, f, DOMAIN, classic_products=True)

        start = time.time()
        err_trunc = np.max(np.abs(truncated.interpolate_batch(grid) - exact))
        err_classic = np.max(np.abs(classic.interpolate_batch(grid) - exact))
        elapsed = time.time() - start

        nodes = classic.nodes
        bary = BarycentricInterpolator(nodes, [f(x) for x in nodes])
        err_bary = np.max(np.abs(bary(grid) - exact))
        rows.append([n, f"{err_trunc:.2e}", f"{err_classic:.2e}",
                     f"{err_bary:.2e}", f"{elapsed:.3f}s"])
    _report("TEST 1: Max error over grid",
            ["n", "truncated", "classic", "barycentric", "time"], rows)


def test_2_sample_points():
    """Test 2: relative error at the sample points."""
    truncated = InterpolationEngine(50, f, DOMAIN)
    classic = InterpolationEngine(50, f, DOMAIN, classic_products=True)
    rows = []
    for x in SAMPLE_POINTS:
        exact = f(x)
        rel_trunc = abs(truncated.interpolate(x) - exact) / abs(exact) * 100
        rel_classic = abs(classic.interpolate(x) - exact) / abs(exact) * 100
        rows.append([x, f"{rel_trunc:.3e}%", f"{rel_classic:.3e}%"])
    _report("TEST 2: Relative error at sample points (n = 50)",
            ["x", "truncated", "classic"], rows)


if __name__ == "__main__":
    test_1_max_error()
    test_2_sample_points()
