"""
Compare two matrices by the sum of their elements.

Shape and cell contents play no part: [[0, 1], [2, 3]] and [[6]] are
"equal" here. Matrices of different sides always compare as less.
"""

from ..errors import MatrixError
from ..matrix import SUM_COMPARISONS, compare
from .common import error_result, failure, missing_parameters, parse_matrix, run, size_of


def compare_matrices(matrix_a_data, matrix_b_data, operation=None):
    """
    Compare two matrices by element sum.

    Args:
        matrix_a_data: 2D list (or flat list) representing the first matrix
        matrix_b_data: 2D list (or flat list) representing the second matrix
        operation: Optional operator symbol (>, >=, <, <=, ==, !=)

    Returns:
        Dictionary with the compare value, every predicate, and the result
        of `operation` when one was given
    """
    if operation is not None and operation not in SUM_COMPARISONS:
        return failure(
            f"Unsupported operation: {operation} "
            f"(expected one of {', '.join(SUM_COMPARISONS)})",
            "validation_error"
        )

    try:
        matrix_a = parse_matrix(matrix_a_data, "matrix_a")
        matrix_b = parse_matrix(matrix_b_data, "matrix_b")

        result = {
            "success": True,
            "compare": compare(matrix_a, matrix_b),
            "predicates": {
                symbol: predicate(matrix_a, matrix_b)
                for symbol, predicate in SUM_COMPARISONS.items()
            },
            "sum_a": matrix_a.sum_of_elements(),
            "sum_b": matrix_b.sum_of_elements(),
            "matrix_a_size": size_of(matrix_a),
            "matrix_b_size": size_of(matrix_b)
        }

        if operation is not None:
            result["result"] = result["predicates"][operation]
            result["operation"] = f"matrix_a {operation} matrix_b"

        return result

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "matrix_a", "matrix_b")
    if missing:
        return missing
    return compare_matrices(
        input_data["matrix_a"],
        input_data["matrix_b"],
        input_data.get("operation")
    )


def main():
    run("matrix-compare", handle)


if __name__ == "__main__":
    main()
