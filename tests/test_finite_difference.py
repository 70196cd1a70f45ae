"""Tests for FiniteDifferenceTable construction and indexing."""

import math

import numpy as np
import pytest

from pyinterp import FiniteDifferenceTable, FunctionWrapper, InsufficientPointsError


@pytest.fixture
def sin_table():
    f = FunctionWrapper(math.sin, (0.0, 1.0))
    return FiniteDifferenceTable(9, f), f


class TestConstruction:
    def test_row0_is_samples(self, sin_table):
        table, f = sin_table
        nodes = np.linspace(0.0, 1.0, 9)
        np.testing.assert_allclose(table.row(0), [f(x) for x in nodes], rtol=0, atol=1e-15)

    def test_nodes_and_step(self, sin_table):
        table, _ = sin_table
        assert table.step == pytest.approx(0.125)
        np.testing.assert_allclose(table.nodes, np.linspace(0.0, 1.0, 9))

    def test_nodes_include_both_endpoints(self, sin_table):
        table, _ = sin_table
        assert table.nodes[0] == 0.0
        assert table.nodes[-1] == pytest.approx(1.0)

    def test_difference_recurrence(self, sin_table):
        table, _ = sin_table
        for k in range(table.degree() - 1):
            upper = table.row(k)
            lower = table.row(k + 1)
            for j in range(len(lower)):
                assert lower[j] == upper[j + 1] - upper[j]

    def test_row_lengths(self, sin_table):
        table, _ = sin_table
        assert [len(table.row(k)) for k in range(table.degree())] == list(range(9, 0, -1))

    def test_degree_is_node_count(self, sin_table):
        table, _ = sin_table
        assert table.degree() == 9
        assert len(table) == 9

    def test_matches_numpy_diff(self, sin_table):
        table, _ = sin_table
        samples = table.row(0)
        for k in range(1, table.degree()):
            np.testing.assert_allclose(table.row(k), np.diff(samples, n=k), atol=1e-15)

    def test_quadratic_second_differences_constant(self):
        f = FunctionWrapper(lambda x: 3.0 * x ** 2, (0.0, 4.0))
        table = FiniteDifferenceTable(5, f)
        np.testing.assert_allclose(table.row(2), [6.0, 6.0, 6.0])
        np.testing.assert_allclose(table.row(3), [0.0, 0.0], atol=1e-12)

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_few_nodes(self, n):
        f = FunctionWrapper(math.sin, (0.0, 1.0))
        with pytest.raises(InsufficientPointsError):
            FiniteDifferenceTable(n, f)

    def test_two_nodes(self):
        f = FunctionWrapper(lambda x: 2.0 * x + 1.0, (0.0, 1.0))
        table = FiniteDifferenceTable(2, f)
        assert table.row(0).tolist() == [1.0, 3.0]
        assert table.row(1).tolist() == [2.0]


class TestIndexing:
    def test_in_range(self, sin_table):
        table, _ = sin_table
        assert table[0, 3] == table.row(0)[3]
        assert table[2, 1] == table.row(2)[1]

    def test_clamps_to_last_entry(self, sin_table):
        table, _ = sin_table
        last = table.row(4)[-1]
        assert table[4, 5] == last
        assert table[4, 100] == last

    def test_clamp_on_single_entry_row(self, sin_table):
        table, _ = sin_table
        assert table[8, 0] == table[8, 3]

    def test_negative_column(self, sin_table):
        table, _ = sin_table
        with pytest.raises(IndexError):
            table[1, -1]

    def test_row_out_of_range(self, sin_table):
        table, _ = sin_table
        with pytest.raises(IndexError):
            table[9, 0]

    def test_returns_python_float(self, sin_table):
        table, _ = sin_table
        assert isinstance(table[1, 1], float)


class TestImmutability:
    def test_row_returns_copy(self, sin_table):
        table, _ = sin_table
        row = table.row(0)
        row[0] = 42.0
        assert table[0, 0] == 0.0

    def test_internal_rows_read_only(self, sin_table):
        table, _ = sin_table
        with pytest.raises(ValueError):
            table._rows[1][0] = 1.0


class TestFromValues:
    def test_builds_pyramid(self):
        table = FiniteDifferenceTable.from_values([1.0, 4.0, 9.0, 16.0])
        assert table.degree() == 4
        assert table.row(1).tolist() == [3.0, 5.0, 7.0]
        assert table.row(2).tolist() == [2.0, 2.0]
        assert table.row(3).tolist() == [0.0]
        assert table.nodes is None
        assert table.step is None

    def test_single_value(self):
        table = FiniteDifferenceTable.from_values([7.0])
        assert table.degree() == 1
        assert table[0, 5] == 7.0

    def test_matches_function_table(self, sin_table):
        table, _ = sin_table
        other = FiniteDifferenceTable.from_values(table.row(0))
        for k in range(table.degree()):
            np.testing.assert_array_equal(other.row(k), table.row(k))

    @pytest.mark.parametrize("values", [[], [[1.0, 2.0]], [1.0, float("inf")]])
    def test_invalid(self, values):
        with pytest.raises(ValueError):
            FiniteDifferenceTable.from_values(values)


def test_str_uses_scientific_notation():
    table = FiniteDifferenceTable.from_values([1.0, 2.0])
    assert str(table) == "1.00e+00\t2.00e+00\n1.00e+00"
    assert repr(table) == "FiniteDifferenceTable(degree=2)"
