from ..errors import MatrixError
from ..matrix import DEFAULT_MAX_ELEMENT, DEFAULT_MIN_ELEMENT, SquareMatrix
from .common import MAX_SIDE, error_result, make_rng, missing_parameters, run, size_of


def _require_int(name, value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer (got {type(value).__name__})")
    return value


def generate_matrix(side, min_element=DEFAULT_MIN_ELEMENT, max_element=DEFAULT_MAX_ELEMENT, seed=None):
    """
    Generate a random square matrix.

    Args:
        side: Number of rows and columns (1 to MAX_SIDE)
        min_element: Smallest possible cell value (inclusive)
        max_element: Upper bound for cell values (exclusive)
        seed: Optional integer seed for reproducible output

    Returns:
        Dictionary containing success status and the generated matrix
    """
    try:
        side = _require_int("side", side)
        min_element = _require_int("min", min_element)
        max_element = _require_int("max", max_element)

        if side > MAX_SIDE:
            raise ValueError(f"Matrix size limited to {MAX_SIDE}×{MAX_SIDE} for performance reasons")

        matrix = SquareMatrix.random(side, min_element, max_element, rng=make_rng(seed))

        return {
            "success": True,
            "matrix": matrix.to_grid(),
            "rendered": matrix.render(),
            "matrix_size": size_of(matrix),
            "range": [min_element, max_element]
        }

    except (MatrixError, ValueError) as e:
        return error_result(e)


def handle(input_data):
    missing = missing_parameters(input_data, "side")
    if missing:
        return missing
    return generate_matrix(
        input_data["side"],
        input_data.get("min", DEFAULT_MIN_ELEMENT),
        input_data.get("max", DEFAULT_MAX_ELEMENT),
        input_data.get("seed")
    )


def main():
    run("matrix-random", handle)


if __name__ == "__main__":
    main()
