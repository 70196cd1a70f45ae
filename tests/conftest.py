"""Shared test fixtures for pyinterp tests."""

import math

import pytest

from pyinterp import InterpolationEngine, LagrangeBuilder


# ---------------------------------------------------------------------------
# Test functions
# ---------------------------------------------------------------------------

SCENARIO_DOMAIN = (0.4, 0.9)


def scenario_f(x):
    """x^2 - sin(pi x)"""
    return x ** 2 - math.sin(math.pi * x)


def scenario_derivative(n):
    """n-th derivative of x^2 - sin(pi x)."""
    def nth(x):
        theta = {1: 2.0 * x, 2: 2.0}.get(n, 0.0)
        return theta - math.pi ** n * math.sin(math.pi * x + math.pi / 2 * n)
    return nth


def cubic(x):
    """2x^3 - x^2 + 0.5x - 3"""
    return 2.0 * x ** 3 - x ** 2 + 0.5 * x - 3.0


def exp_derivative(_n):
    """Every derivative of exp is exp."""
    return math.exp


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine_scenario():
    """50-node engine with the default (truncated) products."""
    return InterpolationEngine(50, scenario_f, SCENARIO_DOMAIN)


@pytest.fixture
def engine_scenario_classic():
    """50-node engine with textbook products."""
    return InterpolationEngine(50, scenario_f, SCENARIO_DOMAIN, classic_products=True)


@pytest.fixture
def lagrange_scenario():
    return LagrangeBuilder(scenario_f, scenario_derivative, SCENARIO_DOMAIN)


@pytest.fixture
def lagrange_exp():
    return LagrangeBuilder(math.exp, exp_derivative, (0.0, 1.0))
