from ..errors import MatrixError
from .common import error_result, missing_parameters, parse_matrix, run, size_of


def fingerprint_matrix(matrix_data):
    """
    Compute the fingerprint of a matrix.

    Fails with a division_error when any cell is zero.
    """
    try:
        matrix = parse_matrix(matrix_data)

        return {
            "success": True,
            "fingerprint": matrix.fingerprint(),
            "matrix_size": size_of(matrix)
        }

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "matrix")
    if missing:
        return missing
    return fingerprint_matrix(input_data["matrix"])


def main():
    run("matrix-fingerprint", handle)


if __name__ == "__main__":
    main()
