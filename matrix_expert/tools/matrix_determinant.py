import math

from ..matrix import get_determinant
from .common import (
    ELEMENT_TYPE,
    MAX_DETERMINANT_DIMENSION,
    failure,
    format_value,
    log,
    parse_matrix,
    run_tool,
    size_label,
)


def compute_determinant(matrix_data):
    """
    Compute the determinant of a matrix by permutation expansion.

    Args:
        matrix_data: 2D list representing the matrix

    Returns:
        Dictionary containing success status and determinant
    """
    try:
        matrix = parse_matrix(matrix_data)

        # Non-square input is left to get_determinant so it reports NotImplemented
        if matrix.m == matrix.n and matrix.m > MAX_DETERMINANT_DIMENSION:
            raise ValueError(
                f"Matrix size limited to {MAX_DETERMINANT_DIMENSION}×{MAX_DETERMINANT_DIMENSION} "
                f"for determinant computation"
            )

        permutation_count = math.factorial(matrix.m)
        if matrix.m == matrix.n:
            log(f"Expanding {permutation_count} permutations for a {size_label(matrix)} determinant")

        det = get_determinant(matrix, element_type=ELEMENT_TYPE)
        simplified_det = format_value(det)

        return {
            "success": True,
            "determinant": simplified_det,
            "matrix_size": size_label(matrix),
            "is_singular": simplified_det == "0",
            "permutations": permutation_count
        }

    except Exception as e:
        return failure(e, "computing determinant")


def main():
    run_tool(compute_determinant, ["matrix"])


if __name__ == "__main__":
    main()
