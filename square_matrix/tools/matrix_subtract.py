from ..errors import MatrixError
from .common import error_result, missing_parameters, parse_matrix, run, size_of


def subtract_matrices(matrix_a_data, matrix_b_data):
    """
    Subtract the second matrix from the first, element by element.

    Args:
        matrix_a_data: 2D list (or flat list) representing the first matrix
        matrix_b_data: 2D list (or flat list) representing the second matrix

    Returns:
        Dictionary containing success status and difference matrix
    """
    try:
        matrix_a = parse_matrix(matrix_a_data, "matrix_a")
        matrix_b = parse_matrix(matrix_b_data, "matrix_b")

        difference = matrix_a - matrix_b

        return {
            "success": True,
            "difference": difference.to_grid(),
            "rendered": difference.render(),
            "matrix_a_size": size_of(matrix_a),
            "matrix_b_size": size_of(matrix_b),
            "result_size": size_of(difference)
        }

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "matrix_a", "matrix_b")
    if missing:
        return missing
    return subtract_matrices(input_data["matrix_a"], input_data["matrix_b"])


def main():
    run("matrix-subtract", handle)


if __name__ == "__main__":
    main()
