"""Interpolate x^2 - sin(pi x) on [0.4, 0.9) with Newton/Gauss formulas."""

import math

from pyinterp import InterpolationEngine


def f(x):
    """x^2 - sin(pi x)"""
    return x ** 2 - math.sin(math.pi * x)


domain = (0.4, 0.9)
points = [0.53, 0.43, 0.86, 0.67]

for classic in (False, True):
    engine = InterpolationEngine(50, f, domain, classic_products=classic)
    label = "classic" if classic else "truncated"
    print(f"--- {label} products ---")
    for x in points:
        exact = f(x)
        approx = engine.interpolate(x)
        print(f"Point: {x}")
        print(f"Function:   {exact:.10f}")
        print(f"Calculated: {approx:.10f}")
        print(f"Err: {abs((exact - approx) / approx * 100):.4f}%\n")
