"""
Placeholder determinant tool.

The value returned is a random integer in [-25, 25), not the determinant of
the input. Results carry "placeholder": true so callers can tell.
"""

import sys

from ..errors import MatrixError
from .common import error_result, make_rng, missing_parameters, parse_matrix, run, size_of


def placeholder_determinant(matrix_data, seed=None):
    try:
        matrix = parse_matrix(matrix_data)
        determinant = matrix.determinant(rng=make_rng(seed))

        print("[matrix-determinant] Warning: returning a placeholder value, "
              "not the determinant", file=sys.stderr)

        return {
            "success": True,
            "determinant": determinant,
            "placeholder": True,
            "matrix_size": size_of(matrix)
        }

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "matrix")
    if missing:
        return missing
    return placeholder_determinant(input_data["matrix"], input_data.get("seed"))


def main():
    run("matrix-determinant", handle)


if __name__ == "__main__":
    main()
