from ..matrix import multiply_matrices as multiply
from .common import ELEMENT_TYPE, failure, format_matrix, parse_matrix, run_tool, size_label


def multiply_matrices(matrix_a_data, matrix_b_data):
    """
    Multiply two matrices.

    Args:
        matrix_a_data: 2D list representing first matrix
        matrix_b_data: 2D list representing second matrix

    Returns:
        Dictionary containing success status and product matrix
    """
    try:
        matrix_a = parse_matrix(matrix_a_data, "matrix_a")
        matrix_b = parse_matrix(matrix_b_data, "matrix_b")

        product = multiply(matrix_a, matrix_b, element_type=ELEMENT_TYPE)

        return {
            "success": True,
            "product": format_matrix(product),
            "matrix_a_size": size_label(matrix_a),
            "matrix_b_size": size_label(matrix_b),
            "result_size": size_label(product)
        }

    except Exception as e:
        return failure(e, "multiplying matrices")


def main():
    run_tool(multiply_matrices, ["matrix_a", "matrix_b"])


if __name__ == "__main__":
    main()
