"""Errors raised by the square matrix value type."""


class MatrixError(Exception):
    """Base class for all matrix errors."""


class InvalidShapeError(MatrixError, ValueError):
    """Input cannot be arranged into a square grid of integers."""


class DimensionMismatchError(MatrixError, ValueError):
    """A binary operation was given matrices of different sides."""

    def __init__(self, operation: str, first_side: int, second_side: int):
        self.operation = operation
        self.first_side = first_side
        self.second_side = second_side
        super().__init__(
            f"Cannot {operation} matrices of different sides "
            f"({first_side}×{first_side} and {second_side}×{second_side})"
        )


class DivideByZeroError(MatrixError, ZeroDivisionError):
    """The fingerprint hit a zero cell."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cannot fingerprint a matrix with a zero cell at ({row}, {col})")
