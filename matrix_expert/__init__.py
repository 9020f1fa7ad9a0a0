"""Generic matrix arithmetic with a Leibniz-formula determinant."""
from .errors import (
    EmptyVectorError,
    MatrixError,
    MismatchError,
    NonUniformError,
    NotImplementedShapeError,
)
from .matrix import (
    Matrix,
    add_matrices,
    can_add,
    can_multiply,
    create_identity_matrix,
    get_determinant,
    is_square,
    multiply_matrices,
)
from .numeric import Numeric, cast
from .permutations import permutation_sign, permutations, signed_permutations
from .vector import add_vectors

__version__ = "0.1.0"

__all__ = [
    "EmptyVectorError",
    "MatrixError",
    "MismatchError",
    "NonUniformError",
    "NotImplementedShapeError",
    "Matrix",
    "Numeric",
    "add_matrices",
    "add_vectors",
    "can_add",
    "can_multiply",
    "cast",
    "create_identity_matrix",
    "get_determinant",
    "is_square",
    "multiply_matrices",
    "permutation_sign",
    "permutations",
    "signed_permutations",
]
