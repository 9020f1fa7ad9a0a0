from ..matrix import add_matrices as add
from .common import failure, format_matrix, parse_matrix, run_tool, size_label


def add_matrices(matrix_a_data, matrix_b_data):
    """Add two matrices of the same shape."""
    try:
        matrix_a = parse_matrix(matrix_a_data, "matrix_a")
        matrix_b = parse_matrix(matrix_b_data, "matrix_b")

        total = add(matrix_a, matrix_b)

        return {
            "success": True,
            "sum": format_matrix(total),
            "result_size": size_label(total)
        }

    except Exception as e:
        return failure(e, "adding matrices")


def main():
    run_tool(add_matrices, ["matrix_a", "matrix_b"])


if __name__ == "__main__":
    main()
