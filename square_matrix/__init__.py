"""
square_matrix: integer square matrices with sum-based ordering.

Provides:
- matrix: the SquareMatrix value type, arithmetic and sum-based comparisons
- errors: InvalidShapeError, DimensionMismatchError, DivideByZeroError
- tools: JSON stdin/stdout commands, one per operation
- console: interactive menu front end
"""

from .errors import (
    DimensionMismatchError,
    DivideByZeroError,
    InvalidShapeError,
    MatrixError,
)
from .matrix import (
    SquareMatrix,
    add,
    compare,
    from_flat,
    from_grid,
    greater,
    greater_equal,
    less,
    less_equal,
    multiply,
    not_sum_equal,
    random_matrix,
    subtract,
    sum_equal,
    sum_order_key,
)

__version__ = "0.1.0"

__all__ = [
    "DimensionMismatchError",
    "DivideByZeroError",
    "InvalidShapeError",
    "MatrixError",
    "SquareMatrix",
    "add",
    "compare",
    "from_flat",
    "from_grid",
    "greater",
    "greater_equal",
    "less",
    "less_equal",
    "multiply",
    "not_sum_equal",
    "random_matrix",
    "subtract",
    "sum_equal",
    "sum_order_key",
]
