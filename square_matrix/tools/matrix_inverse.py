"""
Placeholder inverse tool.

Returns a random matrix with the same side as the input, not its inverse.
Results carry "placeholder": true so callers can tell.
"""

import sys

from ..errors import MatrixError
from .common import error_result, make_rng, missing_parameters, parse_matrix, run, size_of


def placeholder_inverse(matrix_data, seed=None):
    try:
        matrix = parse_matrix(matrix_data)
        inverse = matrix.inverse(rng=make_rng(seed))

        print("[matrix-inverse] Warning: returning a placeholder matrix, "
              "not the inverse", file=sys.stderr)

        return {
            "success": True,
            "inverse": inverse.to_grid(),
            "rendered": inverse.render(),
            "placeholder": True,
            "matrix_size": size_of(matrix)
        }

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "matrix")
    if missing:
        return missing
    return placeholder_inverse(input_data["matrix"], input_data.get("seed"))


def main():
    run("matrix-inverse", handle)


if __name__ == "__main__":
    main()
