"""
Shared plumbing for the matrix tools.

Every tool reads one JSON object from stdin and writes one JSON object to
stdout. Results always carry a "success" flag; failures add "error" and
"error_type". The process exits with status 1 when success is false.
Diagnostics go to stderr, never stdout.
"""

import json
import random
import sys
from typing import Any, Callable, Dict, Optional

from ..errors import DimensionMismatchError, DivideByZeroError, InvalidShapeError
from ..matrix import SquareMatrix

# Size limit for performance
MAX_SIDE = 10

Result = Dict[str, Any]


def failure(error: str, error_type: str) -> Result:
    return {
        "success": False,
        "error": error,
        "error_type": error_type,
    }


def error_result(error: Exception) -> Result:
    """Map a matrix or validation error onto a failure result."""
    if isinstance(error, DimensionMismatchError):
        return failure(str(error), "dimension_error")
    if isinstance(error, DivideByZeroError):
        return failure(str(error), "division_error")
    return failure(str(error), "validation_error")


def missing_parameters(input_data: Dict[str, Any], *names: str) -> Optional[Result]:
    """Return a failure result naming the first missing parameter, if any."""
    for name in names:
        if input_data.get(name) is None:
            return failure(f"Missing required parameter '{name}'", "validation_error")
    return None


def size_of(matrix: SquareMatrix) -> str:
    return f"{matrix.side}×{matrix.side}"


def parse_matrix(matrix_data: Any, name: str = "matrix") -> SquareMatrix:
    """
    Build a SquareMatrix from tool input.

    Args:
        matrix_data: 2D list of integers, or a flat list whose length is a
            perfect square (reshaped row-major)
        name: Parameter name used in error messages

    Returns:
        The parsed matrix

    Raises:
        ValueError: if the input is not a list, is ragged or exceeds MAX_SIDE
        InvalidShapeError: if the input is not square or not integral
    """
    # Validate matrix input
    if not matrix_data or not isinstance(matrix_data, list):
        raise ValueError(f"{name} must be a 2D array (list of lists) or a flat list of integers")

    nested = [isinstance(row, list) for row in matrix_data]
    if all(nested):
        # Size limit for performance
        if len(matrix_data) > MAX_SIDE:
            raise ValueError(f"Matrix size limited to {MAX_SIDE}×{MAX_SIDE} for performance reasons")

        # Check that all rows have the same length
        row_length = len(matrix_data[0])
        if not all(len(row) == row_length for row in matrix_data):
            raise ValueError(f"All rows of {name} must have the same length")

        if row_length != len(matrix_data):
            raise InvalidShapeError(f"{name} must be square (got {len(matrix_data)}×{row_length})")

        return SquareMatrix.from_grid(matrix_data)

    if any(nested):
        raise ValueError(f"{name} mixes rows and plain elements")

    if len(matrix_data) > MAX_SIDE ** 2:
        raise ValueError(f"Matrix size limited to {MAX_SIDE}×{MAX_SIDE} for performance reasons")

    return SquareMatrix.from_flat(matrix_data)


def make_rng(seed: Any) -> Optional[random.Random]:
    """A seeded random source, or None for the shared module-level one."""
    if seed is None:
        return None
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise ValueError(f"seed must be an integer (got {type(seed).__name__})")
    return random.Random(seed)


def run(tool_name: str, handler: Callable[[Dict[str, Any]], Result]) -> None:
    """
    Tool entry point: read JSON from stdin, run the handler, print the result.

    Exits with status 1 if the handler reports failure or anything goes wrong.
    """
    try:
        # Read input from stdin
        input_data = json.load(sys.stdin)

        if not isinstance(input_data, dict):
            result = failure("Input must be a JSON object", "input_error")
        else:
            result = handler(input_data)

        # Return result
        print(json.dumps(result))

        # Exit with error code if computation failed
        if not result.get("success", False):
            sys.exit(1)

    except json.JSONDecodeError as e:
        print(json.dumps(failure(f"Invalid JSON input: {str(e)}", "input_error")))
        sys.exit(1)

    except Exception as e:
        print(f"[{tool_name}] Unexpected error: {e}", file=sys.stderr)
        print(json.dumps(failure(f"Unexpected error: {str(e)}", "system_error")))
        sys.exit(1)
