"""
Square matrix value type.

A SquareMatrix is an n×n grid of integers with element-wise addition and
subtraction, the standard matrix product, a fingerprint and a fixed-width
text rendering.

Ordering and equality between matrices are sum-based: two matrices compare
by the total of their cells only, ignoring shape and cell positions. That
comparison lives in the named functions `compare`, `sum_equal` and friends.
Python's `==` on SquareMatrix stays structural (same side, same cells).
"""

import functools
import random as _random
from typing import Iterable, List, Optional, Sequence

import sympy

from .errors import DimensionMismatchError, DivideByZeroError, InvalidShapeError

Grid = List[List[int]]

DEFAULT_MIN_ELEMENT = -10
DEFAULT_MAX_ELEMENT = 10
DETERMINANT_RANGE = (-25, 25)

_INT32_SPAN = 2 ** 32
_INT32_MIN = -(2 ** 31)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _wrap32(value: int) -> int:
    """Wrap to a signed 32-bit integer."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _truncated_mod(dividend: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


def _copy_square_grid(grid: Sequence[Sequence[int]]) -> Grid:
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise InvalidShapeError("Matrix must be a 2D array (list of lists)")

    side = len(grid)
    if side == 0:
        raise InvalidShapeError("Matrix must have at least one row")

    cells = []
    for row_index, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidShapeError("Matrix must be a 2D array (each row must be a list)")
        if len(row) != side:
            raise InvalidShapeError(
                f"Matrix must be square: row {row_index} has {len(row)} elements, expected {side}"
            )
        for col_index, value in enumerate(row):
            if not _is_int(value):
                raise InvalidShapeError(
                    f"Matrix elements must be integers (got {type(value).__name__} "
                    f"at ({row_index}, {col_index}))"
                )
        cells.append(list(row))

    return cells


def _random_grid(side: int, min_element: int, max_element: int, rng) -> Grid:
    if side < 1:
        raise InvalidShapeError(f"Matrix side must be at least 1 (got {side})")
    if min_element >= max_element:
        raise ValueError(
            f"Empty element range [{min_element}, {max_element})"
        )

    rng = rng or _random
    return [
        [rng.randrange(min_element, max_element) for _ in range(side)]
        for _ in range(side)
    ]


class SquareMatrix:
    """
    An n×n grid of integers.

    Instances own their storage: constructors copy the caller's grid and
    every operation returns a new matrix. The only mutating operation is
    `random_fill`, which replaces the whole grid; it is not safe to call on
    the same instance from several threads without external locking.
    """

    def __init__(self, grid: Sequence[Sequence[int]]):
        self._cells = _copy_square_grid(grid)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "SquareMatrix":
        """Build a matrix from a square grid (the grid is copied)."""
        return cls(grid)

    @classmethod
    def from_flat(cls, values: Iterable[int]) -> "SquareMatrix":
        """
        Reshape a flat sequence of integers into a square matrix, row-major.

        Args:
            values: n integers, where n is a perfect square

        Returns:
            A sqrt(n)×sqrt(n) matrix

        Raises:
            InvalidShapeError: if n is not a positive perfect square
        """
        values = list(values)
        side, exact = sympy.integer_nthroot(len(values), 2)
        if not values or not exact:
            raise InvalidShapeError(
                f"Cannot reshape {len(values)} elements into a square matrix"
            )
        return cls([values[row * side:(row + 1) * side] for row in range(side)])

    @classmethod
    def random(
        cls,
        side: int,
        min_element: int = DEFAULT_MIN_ELEMENT,
        max_element: int = DEFAULT_MAX_ELEMENT,
        rng=None,
    ) -> "SquareMatrix":
        """Build a side×side matrix with cells drawn from [min_element, max_element)."""
        return cls(_random_grid(side, min_element, max_element, rng))

    def random_fill(
        self,
        side: int,
        min_element: int = DEFAULT_MIN_ELEMENT,
        max_element: int = DEFAULT_MAX_ELEMENT,
        rng=None,
    ) -> None:
        """
        Replace this matrix's grid with a fresh random side×side grid.

        Each cell is drawn independently and uniformly from
        [min_element, max_element). Pass a seeded `random.Random` as `rng`
        for reproducible output.
        """
        self._cells = _random_grid(side, min_element, max_element, rng)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def side(self) -> int:
        return len(self._cells)

    def sum_of_elements(self) -> int:
        return sum(sum(row) for row in self._cells)

    def fingerprint(self) -> int:
        """
        Fold all cells, row-major, into one integer.

        Starting from the top-left cell, each cell updates the running value
        as h*cell + h mod cell. The remainder takes the sign of the dividend
        and every step wraps to a signed 32-bit integer.

        Raises:
            DivideByZeroError: if any cell is zero
        """
        for row_index, row in enumerate(self._cells):
            for col_index, value in enumerate(row):
                if value == 0:
                    raise DivideByZeroError(row_index, col_index)

        fingerprint = self._cells[0][0]
        for row in self._cells:
            for value in row:
                fingerprint = _wrap32(fingerprint * value + _truncated_mod(fingerprint, value))
        return fingerprint

    def clone(self) -> "SquareMatrix":
        return SquareMatrix(self._cells)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_grid(self) -> Grid:
        """Return a copy of the underlying grid."""
        return [list(row) for row in self._cells]

    def to_flat(self) -> List[int]:
        return [value for row in self._cells for value in row]

    def to_sympy(self) -> sympy.Matrix:
        return sympy.Matrix(self._cells)

    def render(self) -> str:
        """
        Render the grid as text, one line per row.

        Cells in [0, 9] get two leading spaces, all other values one, so
        single-digit non-negative columns line up with two-character values.
        """
        lines = []
        for row in self._cells:
            line = "".join(
                f" {value}" if value < 0 or value > 9 else f"  {value}"
                for value in row
            )
            lines.append(line + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SquareMatrix({self._cells!r})"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: "SquareMatrix") -> "SquareMatrix":
        return add(self, other)

    def subtract(self, other: "SquareMatrix") -> "SquareMatrix":
        return subtract(self, other)

    def multiply(self, other: "SquareMatrix") -> "SquareMatrix":
        return multiply(self, other)

    def __add__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return multiply(self, other)

    __matmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._cells == other._cells

    # Mutable through random_fill.
    __hash__ = None

    # ------------------------------------------------------------------
    # Placeholders
    # ------------------------------------------------------------------

    def determinant(self, rng=None) -> int:
        """
        Placeholder: returns a random integer in [-25, 25).

        This is NOT the determinant of the matrix.
        """
        rng = rng or _random
        return rng.randrange(*DETERMINANT_RANGE)

    def inverse(self, rng=None) -> "SquareMatrix":
        """
        Placeholder: returns a random matrix of the same side.

        This is NOT the inverse of the matrix.
        """
        return SquareMatrix.random(self.side, rng=rng)


# ----------------------------------------------------------------------
# Arithmetic
# ----------------------------------------------------------------------

def _check_sides(operation: str, first: SquareMatrix, second: SquareMatrix) -> int:
    if first.side != second.side:
        raise DimensionMismatchError(operation, first.side, second.side)
    return first.side


def add(first: SquareMatrix, second: SquareMatrix) -> SquareMatrix:
    """Element-wise sum of two matrices of the same side."""
    _check_sides("add", first, second)
    return SquareMatrix([
        [a + b for a, b in zip(row_a, row_b)]
        for row_a, row_b in zip(first._cells, second._cells)
    ])


def subtract(first: SquareMatrix, second: SquareMatrix) -> SquareMatrix:
    """Element-wise difference of two matrices of the same side."""
    _check_sides("subtract", first, second)
    return SquareMatrix([
        [a - b for a, b in zip(row_a, row_b)]
        for row_a, row_b in zip(first._cells, second._cells)
    ])


def multiply(first: SquareMatrix, second: SquareMatrix) -> SquareMatrix:
    """Matrix product: result[i][j] = sum over k of first[i][k] * second[k][j]."""
    side = _check_sides("multiply", first, second)
    a, b = first._cells, second._cells
    return SquareMatrix([
        [sum(a[i][k] * b[k][j] for k in range(side)) for j in range(side)]
        for i in range(side)
    ])


# ----------------------------------------------------------------------
# Sum-based ordering
# ----------------------------------------------------------------------

def compare(first: SquareMatrix, second: SquareMatrix) -> int:
    """
    Compare two matrices by the sum of their elements.

    Returns -1, 0 or 1. Matrices of different sides always compare as -1,
    whatever their sums.
    """
    if first.side != second.side:
        return -1

    first_sum = first.sum_of_elements()
    second_sum = second.sum_of_elements()
    if first_sum > second_sum:
        return 1
    if first_sum == second_sum:
        return 0
    return -1


def sum_equal(first: SquareMatrix, second: SquareMatrix) -> bool:
    """
    True when both matrices have the same element sum.

    Shape and cell contents are ignored: [[0, 1], [2, 3]] is sum-equal to
    [[6]].
    """
    return first.sum_of_elements() == second.sum_of_elements()


def not_sum_equal(first: SquareMatrix, second: SquareMatrix) -> bool:
    return not sum_equal(first, second)


def greater(first: SquareMatrix, second: SquareMatrix) -> bool:
    return compare(first, second) > 0


def greater_equal(first: SquareMatrix, second: SquareMatrix) -> bool:
    return compare(first, second) >= 0


def less(first: SquareMatrix, second: SquareMatrix) -> bool:
    return compare(first, second) < 0


def less_equal(first: SquareMatrix, second: SquareMatrix) -> bool:
    return compare(first, second) <= 0


sum_order_key = functools.cmp_to_key(compare)

SUM_COMPARISONS = {
    ">": greater,
    ">=": greater_equal,
    "<": less,
    "<=": less_equal,
    "==": sum_equal,
    "!=": not_sum_equal,
}


def from_flat(values: Iterable[int]) -> SquareMatrix:
    return SquareMatrix.from_flat(values)


def from_grid(grid: Sequence[Sequence[int]]) -> SquareMatrix:
    return SquareMatrix.from_grid(grid)


def random_matrix(
    side: int,
    min_element: int = DEFAULT_MIN_ELEMENT,
    max_element: int = DEFAULT_MAX_ELEMENT,
    rng: Optional[_random.Random] = None,
) -> SquareMatrix:
    return SquareMatrix.random(side, min_element, max_element, rng)
