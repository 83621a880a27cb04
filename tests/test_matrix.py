"""
Unit tests for square_matrix/matrix.py: construction, queries, arithmetic,
rendering and the placeholder operations.
"""

import random

import pytest

from square_matrix import (
    DimensionMismatchError,
    DivideByZeroError,
    InvalidShapeError,
    SquareMatrix,
    add,
    from_flat,
    from_grid,
    multiply,
    random_matrix,
    subtract,
)


class TestConstruction:
    """Building matrices from grids, flat lists and random sources."""

    def test_from_flat_reshapes_row_major(self):
        matrix = from_flat([1, 2, 3, 4])
        assert matrix.side == 2
        assert matrix.to_grid() == [[1, 2], [3, 4]]

    def test_from_flat_single_element(self):
        assert from_flat([7]).to_grid() == [[7]]

    def test_from_flat_rejects_non_square_length(self):
        with pytest.raises(InvalidShapeError):
            from_flat([1, 2, 3])

    def test_from_flat_rejects_empty(self):
        with pytest.raises(InvalidShapeError):
            from_flat([])

    def test_from_flat_accepts_iterables(self):
        assert from_flat(range(9)).to_grid() == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]

    def test_from_grid_copies_input(self):
        grid = [[1, 2], [3, 4]]
        matrix = from_grid(grid)
        grid[0][0] = 99
        assert matrix.to_grid() == [[1, 2], [3, 4]]

    def test_constructor_accepts_tuples(self):
        assert SquareMatrix(((1, 2), (3, 4))).to_grid() == [[1, 2], [3, 4]]

    @pytest.mark.parametrize("grid", [
        [],
        [[1, 2], [3]],
        [[1, 2]],
        [[1, 2, 3], [4, 5, 6]],
        [[1.5]],
        [[True]],
        [["1"]],
        "ab",
        [1, 2, 3, 4],
    ])
    def test_from_grid_rejects_bad_shapes(self, grid):
        with pytest.raises(InvalidShapeError):
            from_grid(grid)

    def test_invalid_shape_is_a_value_error(self):
        with pytest.raises(ValueError):
            from_flat([1, 2])

    def test_random_fill_replaces_grid_in_place(self):
        matrix = from_flat([1])
        matrix.random_fill(4, rng=random.Random(3))
        assert matrix.side == 4
        assert all(-10 <= value < 10 for value in matrix.to_flat())

    def test_random_fill_custom_range(self):
        matrix = from_flat([1])
        matrix.random_fill(5, -3, 3, rng=random.Random(11))
        assert all(-3 <= value < 3 for value in matrix.to_flat())

    def test_random_fill_seeded_is_reproducible(self):
        first = random_matrix(3, rng=random.Random(7))
        second = random_matrix(3, rng=random.Random(7))
        assert first == second

    def test_random_fill_unseeded_stays_in_default_range(self):
        matrix = SquareMatrix.random(6)
        assert matrix.side == 6
        assert all(-10 <= value < 10 for value in matrix.to_flat())

    def test_random_fill_rejects_zero_side(self):
        with pytest.raises(InvalidShapeError):
            SquareMatrix.random(0)

    def test_random_fill_rejects_empty_range(self):
        with pytest.raises(ValueError):
            SquareMatrix.random(2, 5, 5)


class TestQueries:
    """Side, sum, clone and conversions."""

    def test_sum_of_elements(self):
        assert from_flat([1, -2, 3, 4]).sum_of_elements() == 6

    def test_clone_is_equal_and_independent(self):
        original = from_flat([1, 2, 3, 4])
        copy = original.clone()
        assert copy == original
        assert copy is not original

        copy.random_fill(2, 100, 200, rng=random.Random(0))
        assert original.to_grid() == [[1, 2], [3, 4]]

    def test_to_grid_returns_copy(self):
        matrix = from_flat([1, 2, 3, 4])
        grid = matrix.to_grid()
        grid[1][1] = 0
        assert matrix.to_grid() == [[1, 2], [3, 4]]

    def test_to_flat(self):
        assert from_grid([[1, 2], [3, 4]]).to_flat() == [1, 2, 3, 4]

    def test_to_sympy(self):
        converted = from_flat([1, 2, 3, 4]).to_sympy()
        assert converted.shape == (2, 2)
        assert converted.tolist() == [[1, 2], [3, 4]]

    def test_repr(self):
        assert repr(from_flat([1, 2, 3, 4])) == "SquareMatrix([[1, 2], [3, 4]])"

    def test_matrices_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(from_flat([1]))


class TestFingerprint:
    """Row-major fold h*cell + h mod cell."""

    def test_known_value(self):
        # 1 -> 1*1+0=1 -> 1*2+1=3 -> 3*3+0=9 -> 9*4+1=37
        assert from_flat([1, 2, 3, 4]).fingerprint() == 37

    def test_remainder_follows_dividend_sign(self):
        # 2 -> 4 -> 4*-3+1=-11 -> -11 -> -11*2-1=-23
        assert from_flat([2, -3, 1, 2]).fingerprint() == -23

    def test_wraps_to_32_bits(self):
        assert from_flat([70000]).fingerprint() == 605032704

    def test_large_matrix_stays_in_int32_range(self):
        matrix = SquareMatrix([[9] * 10 for _ in range(10)])
        assert -(2 ** 31) <= matrix.fingerprint() < 2 ** 31

    def test_deterministic(self):
        matrix = from_flat([3, -1, 4, 1, 5, -9, 2, 6, 5])
        assert matrix.fingerprint() == matrix.fingerprint()

    def test_zero_cell_raises(self):
        with pytest.raises(DivideByZeroError) as excinfo:
            from_flat([0, 1, 2, 3]).fingerprint()
        assert (excinfo.value.row, excinfo.value.col) == (0, 0)

    def test_zero_cell_position_reported(self):
        with pytest.raises(DivideByZeroError) as excinfo:
            from_flat([1, 2, 3, 0]).fingerprint()
        assert (excinfo.value.row, excinfo.value.col) == (1, 1)

    def test_divide_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            from_flat([5, 0, 1, 1]).fingerprint()


class TestArithmetic:
    """Element-wise sum and difference, matrix product."""

    def setup_method(self):
        self.a = from_flat([1, 2, 3, 4])
        self.b = from_flat([5, 6, 7, 8])

    def test_add(self):
        assert add(self.a, self.b).to_grid() == [[6, 8], [10, 12]]

    def test_subtract(self):
        assert subtract(self.a, self.b).to_grid() == [[-4, -4], [-4, -4]]

    def test_multiply(self):
        assert multiply(self.a, self.b).to_grid() == [[19, 22], [43, 50]]

    def test_operators_match_functions(self):
        assert self.a + self.b == add(self.a, self.b)
        assert self.a - self.b == subtract(self.a, self.b)
        assert self.a * self.b == multiply(self.a, self.b)
        assert self.a @ self.b == multiply(self.a, self.b)

    def test_methods_match_functions(self):
        assert self.a.add(self.b) == add(self.a, self.b)
        assert self.a.subtract(self.b) == subtract(self.a, self.b)
        assert self.a.multiply(self.b) == multiply(self.a, self.b)

    def test_operands_are_not_modified(self):
        add(self.a, self.b)
        multiply(self.a, self.b)
        assert self.a.to_grid() == [[1, 2], [3, 4]]
        assert self.b.to_grid() == [[5, 6], [7, 8]]

    def test_multiply_matches_sympy(self):
        rng = random.Random(21)
        a = random_matrix(5, rng=rng)
        b = random_matrix(5, rng=rng)
        expected = (a.to_sympy() * b.to_sympy()).tolist()
        assert multiply(a, b).to_grid() == expected

    def test_sum_of_add_is_sum_of_sums(self):
        rng = random.Random(5)
        for side in range(1, 6):
            a = random_matrix(side, rng=rng)
            b = random_matrix(side, rng=rng)
            assert add(a, b).sum_of_elements() == a.sum_of_elements() + b.sum_of_elements()

    def test_multiply_is_associative(self):
        rng = random.Random(9)
        a, b, c = (random_matrix(4, rng=rng) for _ in range(3))
        assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))

    @pytest.mark.parametrize("operation", [add, subtract, multiply])
    def test_dimension_mismatch(self, operation):
        with pytest.raises(DimensionMismatchError) as excinfo:
            operation(self.a, from_flat([1]))
        assert excinfo.value.first_side == 2
        assert excinfo.value.second_side == 1

    def test_dimension_mismatch_message_names_operation(self):
        with pytest.raises(DimensionMismatchError, match="Cannot multiply"):
            self.a * from_flat(range(9))

    def test_operators_reject_other_types(self):
        with pytest.raises(TypeError):
            self.a + 1


class TestRender:
    """Fixed-width text layout."""

    def test_single_digits_get_two_spaces(self):
        assert from_flat([1, 2, 3, 4]).render() == "  1  2\n  3  4\n"

    def test_negatives_and_two_digits_get_one_space(self):
        assert from_flat([1, -2, 10, 0]).render() == "  1 -2\n 10  0\n"

    def test_three_digit_values(self):
        assert from_flat([-100]).render() == " -100\n"

    def test_str_is_render(self):
        matrix = from_flat([5, 6, 7, 8])
        assert str(matrix) == matrix.render()

    def test_render_reproduces_cells(self):
        grid = [[-10, 0, 9], [10, 3, -1], [42, 7, 8]]
        lines = from_grid(grid).render().splitlines()
        assert [[int(token) for token in line.split()] for line in lines] == grid


class TestPlaceholders:
    """Determinant and inverse return random values, not real results."""

    def test_determinant_in_range(self):
        rng = random.Random(1)
        matrix = from_flat([1, 2, 3, 4])
        for _ in range(50):
            assert -25 <= matrix.determinant(rng=rng) < 25

    def test_determinant_seeded_is_reproducible(self):
        matrix = from_flat([1, 2, 3, 4])
        assert matrix.determinant(rng=random.Random(4)) == matrix.determinant(rng=random.Random(4))

    def test_inverse_has_same_side(self):
        matrix = from_flat(range(9))
        inverse = matrix.inverse(rng=random.Random(2))
        assert inverse.side == 3
        assert all(-10 <= value < 10 for value in inverse.to_flat())
