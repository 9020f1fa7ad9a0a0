from ..matrix import create_identity_matrix
from .common import ELEMENT_TYPE, MAX_DIMENSION, failure, format_matrix, run_tool, size_label


def identity_matrix(size):
    """
    Build an identity matrix.

    Args:
        size: Number of rows and columns

    Returns:
        Dictionary containing success status and the identity matrix
    """
    try:
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError("Size must be an integer")

        if size > MAX_DIMENSION:
            raise ValueError(
                f"Matrix dimensions limited to {MAX_DIMENSION}×{MAX_DIMENSION} for performance reasons"
            )

        identity = create_identity_matrix(size, element_type=ELEMENT_TYPE)

        return {
            "success": True,
            "identity": format_matrix(identity),
            "matrix_size": size_label(identity)
        }

    except Exception as e:
        return failure(e, "creating identity matrix")


def main():
    run_tool(identity_matrix, ["size"])


if __name__ == "__main__":
    main()
