"""Tests for FactorialCache."""

import math

import pytest
from scipy.special import factorial

from pyinterp import N_MAX, FactorialCache, FactorialIndexError


class TestFact:
    def test_zero(self):
        assert FactorialCache().fact(0) == 1.0

    def test_small_values(self):
        cache = FactorialCache()
        assert [cache.fact(n) for n in range(6)] == [1.0, 1.0, 2.0, 6.0, 24.0, 120.0]

    def test_recurrence(self):
        cache = FactorialCache()
        for n in range(1, N_MAX):
            assert cache.fact(n) == n * cache.fact(n - 1)

    @pytest.mark.parametrize("n", [10, 25, 50, 101])
    def test_matches_math_factorial(self, n):
        assert FactorialCache().fact(n) == pytest.approx(float(math.factorial(n)), rel=1e-12)

    @pytest.mark.parametrize("n", [7, 33, 90])
    def test_matches_scipy(self, n):
        assert FactorialCache().fact(n) == pytest.approx(factorial(n, exact=False), rel=1e-10)

    def test_returns_float(self):
        assert isinstance(FactorialCache().fact(4), float)


class TestBounds:
    def test_at_capacity_raises(self):
        with pytest.raises(FactorialIndexError):
            FactorialCache().fact(N_MAX)

    def test_is_index_error(self):
        with pytest.raises(IndexError):
            FactorialCache().fact(N_MAX + 10)

    def test_negative_raises(self):
        with pytest.raises(FactorialIndexError):
            FactorialCache().fact(-1)

    def test_error_carries_context(self):
        with pytest.raises(FactorialIndexError) as excinfo:
            FactorialCache(capacity=5).fact(5)
        assert excinfo.value.n == 5
        assert excinfo.value.capacity == 5

    def test_last_slot_is_usable(self):
        cache = FactorialCache(capacity=5)
        assert cache.fact(4) == 24.0

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            FactorialCache(capacity=0)


class TestMemoization:
    def test_entries_filled_lazily(self):
        cache = FactorialCache()
        assert cache[0] == 1.0
        assert cache[5] is None
        cache.fact(5)
        assert cache[5] == 120.0
        assert cache[3] == 6.0
        assert cache[6] is None

    def test_repeated_calls_agree(self):
        cache = FactorialCache()
        first = cache.fact(30)
        assert cache.fact(30) == first
        assert cache.fact(29) * 30 == first

    def test_len_is_capacity(self):
        assert len(FactorialCache()) == N_MAX
        assert len(FactorialCache(capacity=12)) == 12

    def test_peek_out_of_range(self):
        with pytest.raises(FactorialIndexError):
            FactorialCache()[N_MAX]

    def test_repr(self):
        cache = FactorialCache()
        cache.fact(3)
        assert repr(cache) == "FactorialCache(capacity=102, filled=4)"
