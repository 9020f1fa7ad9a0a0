from .common import failure, format_matrix, parse_matrix, run_tool, size_label


def transpose_matrix(matrix_data):
    try:
        matrix = parse_matrix(matrix_data)
        transposed = matrix.transpose()

        return {
            "success": True,
            "transpose": format_matrix(transposed),
            "matrix_size": size_label(matrix),
            "result_size": size_label(transposed)
        }

    except Exception as e:
        return failure(e, "transposing matrix")


def main():
    run_tool(transpose_matrix, ["matrix"])


if __name__ == "__main__":
    main()
